import asyncio
import logging
import os
import platform
import time
from dataclasses import dataclass
from typing import (
    Any,
    Awaitable,
    List,
    Mapping,
    Optional,
    Sequence,
    Union,
    overload,
)
from urllib.parse import urljoin

import httpx
from dotenv import load_dotenv

from ._version import __version__
from .encoding import (
    FORM_CONTENT_TYPE,
    FORM_MEDIA_TYPE,
    JSON_CONTENT_TYPE,
    JSON_MEDIA_TYPE,
    SIREN_MEDIA_TYPE,
    SubmitData,
    append_query,
    encode_json,
    encode_query,
    merge_action_data,
)
from .entity import Action, Entity, Link, SubEntity
from .response import SirenResponse

DEFAULT_HEADERS = {
    "User-Agent": (
        f"sirendipity/{__version__} ({platform.system()} {platform.machine()})"
    ),
    "Accept": f"{SIREN_MEDIA_TYPE},{JSON_MEDIA_TYPE};q=0.5",
}


class SirenClientError(Exception):
    """Base error for client failures."""


class RequestError(SirenClientError):
    """The server answered with a non-2xx status."""

    def __init__(
        self,
        *,
        status: int,
        status_text: str,
        method: Optional[str] = None,
        url: Optional[str] = None,
    ):
        super().__init__(f"{status} {status_text}")
        self.status = status
        self.status_text = status_text
        self.method = method
        self.url = url


class ProtocolError(SirenClientError):
    """The server answered successfully but not with a Siren document."""

    def __init__(self, content_type: Optional[str]):
        super().__init__("Server did not respond with a Siren representation.")
        self.content_type = content_type


class ConfigurationError(SirenClientError):
    """An action declares a media type we cannot build a body for."""

    def __init__(self, media_type: Optional[str]):
        super().__init__(f'Cannot create request body as "{media_type}".')
        self.media_type = media_type


@dataclass(frozen=True)
class ActionRequest:
    method: str
    href: str
    headers: httpx.Headers
    body: Optional[str] = None


def filter_success(response: httpx.Response) -> httpx.Response:
    if not response.is_success:
        request = _request_of(response)
        raise RequestError(
            status=response.status_code,
            status_text=response.reason_phrase,
            method=request.method if request is not None else None,
            url=str(request.url) if request is not None else None,
        )
    return response


def _request_of(response: httpx.Response) -> Optional[httpx.Request]:
    # Hand-built responses have no request attached.
    try:
        return response.request
    except RuntimeError:
        return None


async def filter_siren(response: httpx.Response) -> SirenResponse:
    """
    Turn a successful response into a SirenResponse.
    - 204 yields an empty entity; the body is never read
    - Any other response must be application/vnd.siren+json
    - JSON and document validation errors propagate unchanged
    """
    if response.status_code == 204:
        return SirenResponse(response, Entity.empty())

    content_type = response.headers.get("content-type")
    if content_type != SIREN_MEDIA_TYPE:
        raise ProtocolError(content_type)

    await response.aread()
    return SirenResponse(response, Entity.parse(response.json()))


class SirenClient:
    """
    Client for Siren hypermedia APIs.
    - Resolves hrefs against an optional base URL
    - Fetches entities, submits actions, follows linked sub-entities
    - No retries; every failure reaches the caller
    """

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
        timeout_seconds: float = 10.0,
        logger: Optional[logging.Logger] = None,
        http: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url or None
        self.log = logger or logging.getLogger("sirendipity.client")

        merged = httpx.Headers(DEFAULT_HEADERS)
        merged.update(headers or {})
        self._headers = merged

        self._owns_http = http is None
        self.http = http or httpx.AsyncClient(
            timeout=timeout_seconds, follow_redirects=True
        )

    @classmethod
    def from_env(cls, **kwargs) -> "SirenClient":
        load_dotenv()
        base_url = os.getenv("SIREN_BASE_URL", "").strip()
        return cls(base_url=base_url or None, **kwargs)

    @property
    def headers(self) -> httpx.Headers:
        return httpx.Headers(self._headers)

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    async def __aenter__(self) -> "SirenClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    def resolve(self, href: str) -> str:
        if self.base_url is None:
            return href
        return urljoin(self.base_url, href)

    async def request(
        self,
        method: str,
        href: str,
        *,
        headers: Optional[httpx.Headers] = None,
        body: Optional[str] = None,
    ) -> SirenResponse:
        url = self.resolve(href)
        start = time.perf_counter()

        resp = await self.http.request(
            method,
            url,
            headers=headers if headers is not None else self.headers,
            content=body.encode("utf-8") if body is not None else None,
        )

        self.log.debug(
            "siren.request",
            extra={
                "method": method,
                "url": str(resp.request.url),
                "status": resp.status_code,
                "duration_ms": int((time.perf_counter() - start) * 1000),
            },
        )

        return await filter_siren(filter_success(resp))

    async def get(self, href: str = "/") -> SirenResponse:
        return await self.request("GET", href)

    def build_request(
        self, action: Action, data: Optional[SubmitData] = None
    ) -> ActionRequest:
        """
        Translate an action and caller data into a concrete request.
        - GET: data goes into the query string of the action href
        - application/json: compact JSON body
        - application/x-www-form-urlencoded: query-string encoded body
        - Anything else raises ConfigurationError
        """
        merged = merge_action_data(action, data)
        headers = self.headers

        if action.method == "GET":
            return ActionRequest(
                method=action.method,
                href=append_query(action.href, encode_query(merged)),
                headers=headers,
            )

        if action.type == JSON_MEDIA_TYPE:
            headers["Content-Type"] = JSON_CONTENT_TYPE
            body = encode_json(merged)
        elif action.type == FORM_MEDIA_TYPE:
            headers["Content-Type"] = FORM_CONTENT_TYPE
            body = encode_query(merged)
        else:
            raise ConfigurationError(action.type)

        return ActionRequest(
            method=action.method, href=action.href, headers=headers, body=body
        )

    def submit(
        self, action: Action, data: Optional[SubmitData] = None
    ) -> Awaitable[SirenResponse]:
        """
        Execute an action. The request is built before this returns, so an
        unsupported media type raises here rather than when awaited.
        """
        req = self.build_request(action, data)
        return self.request(req.method, req.href, headers=req.headers, body=req.body)

    async def _fetch_one(
        self, sub_entity: Union[SubEntity, Link]
    ) -> Union[SirenResponse, SubEntity]:
        if sub_entity.href is None:
            return sub_entity
        self.log.debug(
            "siren.follow",
            extra={
                "rel": sub_entity.rel,
                "classes": sub_entity.classes,
                "url": sub_entity.href,
            },
        )
        response = await self.get(sub_entity.href)
        return response.with_rel(sub_entity.rel)

    @overload
    async def fetch_sub_entities(
        self, sub_entities: Union[SubEntity, Link]
    ) -> Union[SirenResponse, SubEntity]: ...

    @overload
    async def fetch_sub_entities(
        self, sub_entities: Sequence[Union[SubEntity, Link]]
    ) -> List[Union[SirenResponse, SubEntity]]: ...

    async def fetch_sub_entities(self, sub_entities: Any) -> Any:
        """
        Resolve sub-entity references.
        Embedded ones come back unchanged; linked ones are fetched
        concurrently and carry the rel they were found under.
        Links are followed the same way as linked sub-entities.
        A single reference gives a single result.
        """
        if isinstance(sub_entities, (SubEntity, Link)):
            return await self._fetch_one(sub_entities)
        return list(
            await asyncio.gather(*(self._fetch_one(e) for e in sub_entities))
        )


__all__ = [
    "SirenClient",
    "SirenClientError",
    "RequestError",
    "ProtocolError",
    "ConfigurationError",
    "ActionRequest",
    "DEFAULT_HEADERS",
    "filter_success",
    "filter_siren",
]
