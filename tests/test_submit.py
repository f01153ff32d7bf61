import json

import pytest
from sirendipity import Action, ConfigurationError


async def _action(client, name: str) -> Action:
    home = await client.get()
    action = home.get_action_by_name(name)
    assert action is not None
    return action


@pytest.mark.asyncio
async def test_submit_query_action(siren_api, client):
    async with client:
        action = await _action(client, "query")
        response = await client.submit(action, {"key": "value"})

    assert response.properties["method"] == "GET"
    assert response.properties["url"] == "/query-action?key=value"
    assert response.properties["body"] == "(Empty)"


@pytest.mark.asyncio
async def test_submit_query_action_with_hidden_fields(siren_api, client):
    async with client:
        action = await _action(client, "query-hidden")
        response = await client.submit(action, {"key": "value"})

    assert response.properties["method"] == "GET"
    assert response.properties["url"] == "/query-action?token=spooky&key=value"


@pytest.mark.asyncio
async def test_caller_data_overrides_hidden_field(siren_api, client):
    async with client:
        action = await _action(client, "query-hidden")
        response = await client.submit(action, {"token": "mine"})

    assert response.properties["url"] == "/query-action?token=mine"


@pytest.mark.asyncio
async def test_submit_form_action(siren_api, client):
    async with client:
        action = await _action(client, "form")
        response = await client.submit(action, {"key": "value avec espace"})

    props = response.properties
    assert props["method"] == "POST"
    assert props["url"] == "/form-action"
    assert (
        props["headers"]["content-type"]
        == "application/x-www-form-urlencoded;charset=UTF-8"
    )
    assert props["body"] == "key=value%20avec%20espace"


@pytest.mark.asyncio
async def test_submit_json_action(siren_api, client):
    async with client:
        action = await _action(client, "json")
        response = await client.submit(action, {"key": '"quotes"'})

    props = response.properties
    assert props["method"] == "PUT"
    assert props["url"] == "/json-action"
    assert props["headers"]["content-type"] == "application/json;charset=UTF-8"
    assert props["body"] == '{"key":"\\"quotes\\""}'
    assert json.loads(props["body"]) == {"key": '"quotes"'}


@pytest.mark.asyncio
async def test_submit_duplicate_field_action_keeps_first_value(siren_api, client):
    async with client:
        action = await _action(client, "duplicate-field")
        response = await client.submit(action, {"key": "value"})

    props = response.properties
    assert props["method"] == "PATCH"
    assert props["url"] == "/duplicate-field-action"
    assert (
        props["headers"]["content-type"]
        == "application/x-www-form-urlencoded;charset=UTF-8"
    )
    assert props["body"] == "token=spooky1&key=value"


@pytest.mark.asyncio
async def test_submit_invalid_type_raises_before_any_request(siren_api, client):
    async with client:
        action = await _action(client, "invalid-type")
        with pytest.raises(ConfigurationError) as exc:
            client.submit(action, {"key": "value"})

    assert exc.value.media_type == "application/x-bojack-horseman"
    assert "application/x-bojack-horseman" in str(exc.value)
    assert not siren_api["echo"].called


@pytest.mark.asyncio
async def test_submit_keeps_default_headers(siren_api, client):
    async with client:
        action = await _action(client, "form")
        response = await client.submit(action, {})

    headers = response.properties["headers"]
    assert headers["accept"] == "application/vnd.siren+json,application/json;q=0.5"
    assert headers["user-agent"].startswith("sirendipity/")


@pytest.mark.asyncio
async def test_submit_does_not_leak_content_type_into_client_headers(
    siren_api, client
):
    async with client:
        action = await _action(client, "json")
        await client.submit(action, {"a": 1})
        response = await client.get("/echo-after-submit")

    assert "content-type" not in client.headers
    assert "content-type" not in response.properties["headers"]
