"""Tests for the Gemini call wrapper (client replaced by a stub)."""

import asyncio
from types import SimpleNamespace

import pytest

from foodlens.models.flows import ExtractProductNameOutput, SuggestRecipesOutput, TranslateTextOutput
from foodlens.services.shared.errors import FlowError
from foodlens.services.shared.gemini import gemini_client
from foodlens.services.shared.gemini.gemini_client import (
    extract_text_from_response,
    first_json_block,
    generate_structured,
)


class RequestLog(list):
    clients_made: int


def stub_client(monkeypatch, response):
    """Make make_client() return a client whose generate_content yields `response`."""
    requests = RequestLog()

    async def generate_content(model, contents, config):
        requests.append(SimpleNamespace(model=model, contents=contents, config=config))
        return response

    client = SimpleNamespace(aio=SimpleNamespace(models=SimpleNamespace(generate_content=generate_content)))

    def make_client(project, location):
        requests.clients_made += 1
        return client

    requests.clients_made = 0
    monkeypatch.setattr(gemini_client, "make_client", make_client)
    monkeypatch.setattr(gemini_client, "_clients", {})
    return requests


def text_response(text):
    part = SimpleNamespace(text=text, inline_data=None)
    return SimpleNamespace(parsed=None, text=text, candidates=[SimpleNamespace(content=SimpleNamespace(parts=[part]))])


class TestJsonExtraction:
    def test_plain_json(self):
        assert first_json_block('{"productName": "Oats"}') == {"productName": "Oats"}

    def test_json_inside_prose(self):
        assert first_json_block('Sure! ```json\n{"a": 1}\n```') == {"a": 1}

    @pytest.mark.parametrize("bad", [None, "", "no json here", "[1, 2]", b"\xff"])
    def test_unusable_input(self, bad):
        assert first_json_block(bad) == {}

    def test_text_from_candidates(self):
        assert extract_text_from_response(text_response('{"a": 1}')) == '{"a": 1}'

    def test_text_missing(self):
        assert extract_text_from_response(SimpleNamespace(candidates=[], text=None)) == ""


@pytest.mark.asyncio
async def test_uses_preparsed_output(monkeypatch):
    parsed = ExtractProductNameOutput(product_name="Oats")
    requests = stub_client(monkeypatch, SimpleNamespace(parsed=parsed, candidates=[], text=None))

    out = await generate_structured("extractProductName", "prompt", ExtractProductNameOutput, model="gemini-x")

    assert out is parsed
    assert requests[0].model == "gemini-x"
    assert requests[0].config.response_mime_type == "application/json"


@pytest.mark.asyncio
async def test_falls_back_to_text(monkeypatch):
    stub_client(monkeypatch, text_response('{"productName": "Honey"}'))

    out = await generate_structured("extractProductName", "prompt", ExtractProductNameOutput)

    assert out.product_name == "Honey"


@pytest.mark.asyncio
async def test_attaches_image_part(monkeypatch, photo_data_uri):
    requests = stub_client(monkeypatch, text_response('{"productName": "Honey"}'))

    await generate_structured("extractProductName", "prompt", ExtractProductNameOutput, image_data_uri=photo_data_uri)

    parts = requests[0].contents[0].parts
    assert len(parts) == 2
    assert parts[1].inline_data.mime_type == "image/png"


@pytest.mark.asyncio
async def test_malformed_image_is_flow_error(monkeypatch):
    stub_client(monkeypatch, text_response("{}"))

    with pytest.raises(FlowError, match="extractProductName"):
        await generate_structured("extractProductName", "prompt", ExtractProductNameOutput, image_data_uri="nope")


@pytest.mark.asyncio
async def test_empty_reply(monkeypatch):
    stub_client(monkeypatch, text_response(""))

    with pytest.raises(FlowError, match="no structured output"):
        await generate_structured("extractProductName", "prompt", ExtractProductNameOutput)
    assert await generate_structured("suggestRecipes", "prompt", SuggestRecipesOutput, required=False) is None


@pytest.mark.asyncio
async def test_schema_mismatch(monkeypatch):
    stub_client(monkeypatch, text_response('{"recipes": "none"}'))

    with pytest.raises(FlowError, match="schema validation"):
        await generate_structured("suggestRecipes", "prompt", SuggestRecipesOutput)


@pytest.mark.asyncio
async def test_client_reused_within_one_loop(monkeypatch):
    requests = stub_client(monkeypatch, text_response('{"translatedText": "Miel"}'))

    await generate_structured("translateText", "prompt", TranslateTextOutput)
    await generate_structured("translateText", "prompt", TranslateTextOutput)

    assert len(requests) == 2
    assert requests.clients_made == 1


@pytest.mark.asyncio
async def test_clients_of_closed_loops_are_dropped(monkeypatch):
    stub_client(monkeypatch, text_response("{}"))
    finished = asyncio.new_event_loop()
    finished.close()
    gemini_client._clients[finished] = object()

    gemini_client.get_client()

    assert finished not in gemini_client._clients
    assert asyncio.get_running_loop() in gemini_client._clients
