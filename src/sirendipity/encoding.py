"""Request body and query-string encoding for Siren actions."""

from __future__ import annotations

import json
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union
from urllib.parse import quote, urlencode

from .entity import FORM_MEDIA_TYPE, Action, Field

SIREN_MEDIA_TYPE = "application/vnd.siren+json"
JSON_MEDIA_TYPE = "application/json"

JSON_CONTENT_TYPE = f"{JSON_MEDIA_TYPE};charset=UTF-8"
FORM_CONTENT_TYPE = f"{FORM_MEDIA_TYPE};charset=UTF-8"

Scalar = Union[str, int, float, bool, None]
SubmitData = Mapping[str, Union[Scalar, List[Scalar]]]

# Punctuation left unescaped in query keys and values.
_QUERY_SAFE = "!'()*"


def fields_to_data(fields: Iterable[Field]) -> Dict[str, Any]:
    """
    Collect the default values declared by an action's fields.
    Fields without a value key are skipped; when a name repeats, the first
    field carrying a value keeps it. An explicit null counts as a value.
    """
    data: Dict[str, Any] = {}
    for field in fields:
        if not field.has_value:
            continue
        if field.name in data:
            continue
        data[field.name] = field.value
    return data


def merge_action_data(
    action: Action, data: Optional[SubmitData] = None
) -> Dict[str, Any]:
    """Field defaults first, caller data on top (caller wins)."""
    merged: Dict[str, Any] = fields_to_data(action.fields) if action.fields else {}
    merged.update(data or {})
    return merged


def _stringify(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _pairs(data: Mapping[str, Any]) -> List[Tuple[str, str]]:
    pairs: List[Tuple[str, str]] = []
    for key, value in data.items():
        if isinstance(value, (list, tuple)):
            pairs.extend((key, _stringify(item)) for item in value)
        else:
            pairs.append((key, _stringify(value)))
    return pairs


def encode_query(data: Mapping[str, Any]) -> str:
    """
    Query-string encode ``data``.
    Spaces become ``%20``; list values repeat the key.
    Example: {"key": "a b", "ok": True} -> 'key=a%20b&ok=true'
    """
    return urlencode(_pairs(data), safe=_QUERY_SAFE, quote_via=quote)


def encode_json(data: Mapping[str, Any]) -> str:
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def append_query(href: str, query: str) -> str:
    separator = "&" if "?" in href else "?"
    return f"{href}{separator}{query}"


__all__ = [
    "SIREN_MEDIA_TYPE",
    "JSON_MEDIA_TYPE",
    "FORM_MEDIA_TYPE",
    "JSON_CONTENT_TYPE",
    "FORM_CONTENT_TYPE",
    "Scalar",
    "SubmitData",
    "fields_to_data",
    "merge_action_data",
    "encode_query",
    "encode_json",
    "append_query",
]
