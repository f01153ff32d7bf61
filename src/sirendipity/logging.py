"""logfmt rendering for the records emitted by SirenClient."""

import logging
from typing import Any, Dict, Tuple

# Extras rendered per event, in this order.
EVENT_FIELDS: Dict[str, Tuple[str, ...]] = {
    "siren.request": ("method", "url", "status", "duration_ms"),
    "siren.follow": ("rel", "classes", "url"),
}
DEFAULT_FIELDS = ("method", "url", "status")


class LogfmtFormatter(logging.Formatter):
    """
    One logfmt line per record, e.g.
    level=debug event=siren.follow rel=linked classes="item order" url=/o/1

    Multi-valued Siren attributes (rel, class) render space separated, the
    way they appear in a link's rel attribute. Missing extras are skipped.
    """

    def format(self, record: logging.LogRecord) -> str:
        event = record.getMessage()
        kv: list[str] = [
            f"level={record.levelname.lower()}",
            f"event={self._fmt_val(event)}",
        ]

        for key in EVENT_FIELDS.get(event, DEFAULT_FIELDS):
            val = getattr(record, key, None)
            if val is None or val == []:
                continue
            kv.append(f"{key}={self._fmt_val(val)}")

        if record.exc_info:
            kv.append(f"exc_type={record.exc_info[0].__name__}")

        return " ".join(kv)

    @staticmethod
    def _fmt_val(val: Any) -> str:
        if isinstance(val, bool):
            return "true" if val else "false"
        if isinstance(val, (int, float)):
            return str(val)
        if isinstance(val, (list, tuple)):
            val = " ".join(str(v) for v in val)
        s = str(val)
        if not s or " " in s or "=" in s or '"' in s:
            s = '"' + s.replace('"', '\\"') + '"'
        return s


__all__ = ["LogfmtFormatter", "EVENT_FIELDS"]
