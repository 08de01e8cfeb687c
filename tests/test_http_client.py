# -*- coding: utf-8 -*-
"""
Autore:        Lorenzo Biosa
Email:         lorenzo@biosa-labs.com
Copyright:
  © 2026 Biosa Labs. Tutti i diritti riservati.

Modulo: tests/test_http_client.py
Descrizione:
  Test di `ApiHttpClient` con sessione finta:
    - composizione URL e applicazione del query builder,
    - header standard e di correlazione,
    - conversione degli errori (rete, status, JSON) in TransportError,
    - nessun retry: una sola richiesta per chiamata.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping
from unittest.mock import MagicMock

import pytest
import requests

from forgerelease.errors import TransportError
from forgerelease.utils.http_client import ApiHttpClient, build_query
from forgerelease.utils.structured_logging import REQUEST_ID_HEADER, request_id_context


def test_build_query_copies() -> None:
    query = {"a": 1}
    out = build_query(query)
    assert out == query
    assert out is not query


def test_get_uses_base_url_and_query_builder(
    fake_session: MagicMock, make_response: Callable[..., MagicMock]
) -> None:
    def builder(query: Mapping[str, Any]) -> Dict[str, Any]:
        return {**query, "extra": "x"}

    fake_session.request.return_value = make_response([{"ok": True}])
    client = ApiHttpClient("https://api.example.com/", query_builder=builder, session=fake_session)

    assert client.get("/things", {"q": "1"}) == [{"ok": True}]

    kwargs = fake_session.request.call_args.kwargs
    assert kwargs["url"] == "https://api.example.com/things"
    assert kwargs["params"] == {"q": "1", "extra": "x"}
    assert kwargs["json"] is None
    assert kwargs["timeout"] is None
    assert fake_session.request.call_count == 1


def test_post_sends_json_and_applies_builder(
    fake_session: MagicMock, make_response: Callable[..., MagicMock]
) -> None:
    fake_session.request.return_value = make_response({"id": 1}, status=201)
    client = ApiHttpClient(
        "https://api.example.com",
        query_builder=lambda q: {**q, "private_token": "t"},
        session=fake_session,
        timeout=5.0,
    )

    assert client.post("things", None, {"name": "x"}) == {"id": 1}

    kwargs = fake_session.request.call_args.kwargs
    assert kwargs["method"] == "POST"
    assert kwargs["url"] == "https://api.example.com/things"
    assert kwargs["params"] == {"private_token": "t"}
    assert kwargs["json"] == {"name": "x"}
    assert kwargs["timeout"] == 5.0


def test_correlation_headers_sent(
    fake_session: MagicMock, make_response: Callable[..., MagicMock]
) -> None:
    fake_session.request.return_value = make_response({})
    client = ApiHttpClient("https://api.example.com", session=fake_session)

    with request_id_context("rid-123"):
        client.get("/x")

    headers = fake_session.request.call_args.kwargs["headers"]
    assert headers[REQUEST_ID_HEADER] == "rid-123"
    assert headers["Accept"] == "application/json"
    assert headers["User-Agent"].startswith("forgerelease/")


def test_network_error_becomes_transport_error(fake_session: MagicMock) -> None:
    fake_session.request.side_effect = requests.ConnectionError("boom")
    client = ApiHttpClient("https://U:T@api.example.com", session=fake_session)

    with pytest.raises(TransportError) as excinfo:
        client.get("/x")

    assert excinfo.value.status_code is None
    assert excinfo.value.url == "https://***@api.example.com/x"
    assert isinstance(excinfo.value.__cause__, requests.ConnectionError)
    assert fake_session.request.call_count == 1


@pytest.mark.parametrize("status", [400, 404, 422, 500, 503])
def test_non_2xx_becomes_transport_error(
    status: int, fake_session: MagicMock, make_response: Callable[..., MagicMock]
) -> None:
    fake_session.request.return_value = make_response({"message": "nope"}, status=status)
    client = ApiHttpClient("https://api.example.com", session=fake_session)

    with pytest.raises(TransportError) as excinfo:
        client.get("/x")

    assert excinfo.value.status_code == status
    assert "nope" in str(excinfo.value)
    assert fake_session.request.call_count == 1


def test_invalid_json_becomes_transport_error(fake_session: MagicMock) -> None:
    resp = MagicMock()
    resp.status_code = 200
    resp.text = "<html>"
    resp.content = b"<html>"
    resp.json.side_effect = ValueError("not json")
    fake_session.request.return_value = resp
    client = ApiHttpClient("https://api.example.com", session=fake_session)

    with pytest.raises(TransportError):
        client.get("/x")


def test_empty_body_returns_none(
    fake_session: MagicMock, make_response: Callable[..., MagicMock]
) -> None:
    fake_session.request.return_value = make_response(None, status=204)
    client = ApiHttpClient("https://api.example.com", session=fake_session)

    assert client.get("/x") is None


def test_empty_base_url_rejected() -> None:
    with pytest.raises(ValueError):
        ApiHttpClient("  ")


def test_repr_hides_credentials(fake_session: MagicMock) -> None:
    client = ApiHttpClient("https://U:T@api.github.com", session=fake_session)
    assert "U:T" not in repr(client)
