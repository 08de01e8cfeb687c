# -*- coding: utf-8 -*-
"""
Autore:        Lorenzo Biosa
Email:         lorenzo@biosa-labs.com
Copyright:
  © 2026 Biosa Labs. Tutti i diritti riservati.

Modulo: tests/conftest.py
Descrizione:
  Fixture comuni per la suite di test:
    - fake_logger: logger configurato per i test.
    - make_response: fabbrica di response HTTP finte (status, body JSON).
    - fake_session: sessione HTTP finta (MagicMock) con metodo .request() e
      attributo .headers, per simulare una `requests.Session` senza rete.
    - fake_repo: repository locale finto (get_branch/get_changelog/sync).
    - clean_env: rimuove le variabili d'ambiente lette dalla configurazione.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable
from unittest.mock import MagicMock

import pytest
from _pytest.monkeypatch import MonkeyPatch

ResponseFactory = Callable[..., MagicMock]

_ENV_VARS = (
    "FORGE_ORIGIN",
    "GH_USERNAME",
    "GH_TOKEN",
    "GITHUB_TOKEN",
    "GITLAB_TOKEN",
    "FORGE_CHANGELOG",
    "FORGE_HTTP_TIMEOUT",
    "LOG_LEVEL",
    "LOG_JSON",
    "LOG_FILE",
)


@pytest.fixture
def fake_logger() -> logging.Logger:
    """
    Restituisce un logger di test con livello DEBUG.
    """
    logger = logging.getLogger("tests")
    logger.setLevel(logging.DEBUG)
    return logger


@pytest.fixture
def make_response() -> ResponseFactory:
    """
    Restituisce una fabbrica di response finte compatibili con `requests.Response`:
      - .status_code, .text, .content, .json()
    """

    def _make(body: Any = None, status: int = 200) -> MagicMock:
        resp = MagicMock()
        resp.status_code = status
        if body is None:
            resp.text = ""
            resp.content = b""
            resp.json.side_effect = ValueError("no body")
        else:
            resp.text = json.dumps(body)
            resp.content = resp.text.encode("utf-8")
            resp.json.return_value = body
        return resp

    return _make


@pytest.fixture
def fake_session(make_response: ResponseFactory) -> MagicMock:
    """
    Sessione HTTP finta con interfaccia minima compatibile con `requests.Session`.

    I test possono ridefinire il return value:
        fake_session.request.return_value = make_response([...])
    """
    sess = MagicMock(spec_set=["request", "headers"])
    sess.headers = {}
    sess.request.return_value = make_response({})
    return sess


@pytest.fixture
def fake_repo() -> MagicMock:
    """
    Repository locale finto: branch "main", changelog "Initial release".
    """
    repo = MagicMock(spec_set=["get_branch", "get_changelog", "sync"])
    repo.get_branch.return_value = "main"
    repo.get_changelog.return_value = "Initial release"
    return repo


@pytest.fixture
def clean_env(monkeypatch: MonkeyPatch) -> MonkeyPatch:
    """Rimuove dall'ambiente le variabili lette da forgerelease."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
