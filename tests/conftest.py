import json

import httpx
import pytest
import respx
from sirendipity import SIREN_MEDIA_TYPE, SirenClient

BASE = "https://siren.test"


def siren(payload, status: int = 200) -> httpx.Response:
    return httpx.Response(
        status,
        content=json.dumps(payload).encode(),
        headers={"Content-Type": SIREN_MEDIA_TYPE},
    )


def home_document() -> dict:
    return {
        "class": ["home"],
        "properties": {"greetings": "Hello!"},
        "actions": [
            {"name": "query", "method": "GET", "href": f"{BASE}/query-action"},
            {
                "name": "query-hidden",
                "method": "GET",
                "href": f"{BASE}/query-action",
                "fields": [
                    {"name": "optional", "type": "hidden"},
                    {"name": "token", "type": "hidden", "value": "spooky"},
                ],
            },
            {"name": "form", "method": "POST", "href": f"{BASE}/form-action"},
            {
                "name": "json",
                "method": "PUT",
                "href": f"{BASE}/json-action",
                "type": "application/json",
            },
            {
                "name": "invalid-type",
                "method": "PUT",
                "href": f"{BASE}/invalid-type-action",
                "type": "application/x-bojack-horseman",
            },
            {
                "name": "duplicate-field",
                "method": "PATCH",
                "href": f"{BASE}/duplicate-field-action",
                "fields": [
                    {"name": "token", "type": "hidden", "value": "spooky1"},
                    {"name": "token", "type": "hidden", "value": "spooky2"},
                ],
            },
        ],
        "entities": [
            {"rel": ["embedded"], "class": ["non-echo"]},
            {"rel": ["linked"], "href": f"{BASE}/entity"},
        ],
        "links": [{"rel": ["self"], "href": BASE}],
    }


def echo(request: httpx.Request) -> httpx.Response:
    """Reflect the received request back as a Siren entity."""
    body = request.content.decode()
    return siren(
        {
            "class": ["echo"],
            "properties": {
                "method": request.method,
                "url": request.url.raw_path.decode(),
                "headers": dict(request.headers.items()),
                "body": body or "(Empty)",
            },
        }
    )


@pytest.fixture
def siren_api():
    with respx.mock(base_url=BASE, assert_all_called=False) as router:
        router.get("/", name="home").mock(return_value=siren(home_document()))
        router.get("/greeting.json", name="greeting").mock(
            return_value=httpx.Response(200, json={"message": "Greetings!"})
        )
        router.get("/teapot", name="teapot").mock(
            return_value=httpx.Response(418, text="short and stout")
        )
        router.get("/nothing", name="nothing").mock(return_value=httpx.Response(204))
        router.route(name="echo").mock(side_effect=echo)
        yield router


@pytest.fixture
def client():
    return SirenClient(base_url=BASE)
