# -*- coding: utf-8 -*-
"""
===============================================================================
Modulo: base.py
Descrizione:
    Contratto comune dei provider (GitHub, GitLab) e logica condivisa:
      - `Provider`: Protocol con `issues()` e `release(repo, version)`.
      - `RepoLike` / `HttpLike`: collaboratori esterni (repository locale e
        client HTTP) iniettati nei provider.
      - `Issue` / `ReleaseRequest`: dati normalizzati, indipendenti dal provider.
      - `parse_repository_identifier`: ricava `owner/repo` da un origin HTTPS o SSH.
      - `require_success_field`: verifica del campo di successo nella risposta.

Linee guida:
    - I provider compongono un client HTTP invece di ereditarlo.
    - Logging strutturato tramite `forgerelease.utils.structured_logging`.

Autore: Lorenzo Biosa <lorenzo@biosa-labs.com>
Licenza:
    Questo file è rilasciato secondo i termini della licenza del repository.
===============================================================================
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Mapping, Optional, Protocol
from urllib.parse import urlsplit

from forgerelease.errors import ApiError, ConfigurationError
from forgerelease.utils.structured_logging import get_logger, log_event, redact_url

__all__ = [
    "ProviderKind",
    "Issue",
    "ReleaseRequest",
    "RepoLike",
    "HttpLike",
    "Provider",
    "parse_repository_identifier",
    "require_success_field",
]

_logger = get_logger(__name__)


class ProviderKind(str, Enum):
    """Etichetta del provider (usata dalla factory e nei log)."""

    GITHUB = "github"
    GITLAB = "gitlab"


@dataclass(frozen=True)
class Issue:
    """Issue normalizzata: stessi campi per GitHub e GitLab."""

    number: int
    title: str
    url: str


@dataclass(frozen=True)
class ReleaseRequest:
    """
    Dati di una release, prima della traduzione nel payload del provider.

    Attributi:
        tag_name: Versione/tag da creare.
        target_ref: Branch (o commit) da cui creare il tag.
        title: Titolo della release.
        body: Testo del changelog.
        draft: Release in bozza (sempre False per le release create qui).
        prerelease: Solo GitHub; ignorato da GitLab.
    """

    tag_name: str
    target_ref: str
    title: str
    body: str
    draft: bool = False
    prerelease: bool = False


class RepoLike(Protocol):
    """Repository locale che fornisce branch e changelog e si sincronizza dopo la release."""

    def get_branch(self) -> str:
        ...

    def get_changelog(self) -> str:
        ...

    def sync(self) -> None:
        ...


class HttpLike(Protocol):
    """Minimo set di metodi del client HTTP usato dai provider (vedi ApiHttpClient)."""

    def get(self, path: str, query: Optional[Mapping[str, Any]] = None) -> Any:
        ...

    def post(
        self,
        path: str,
        query: Optional[Mapping[str, Any]] = None,
        data: Optional[Any] = None,
    ) -> Any:
        ...


class Provider(Protocol):
    """Interfaccia uniforme soddisfatta da GithubProvider e GitlabProvider."""

    kind: ProviderKind
    repo_name: str

    def issues(self) -> List[Issue]:
        ...

    def release(self, repo: RepoLike, version: str) -> None:
        ...


# --------------------------------------------------------------------- #
# Logica condivisa
# --------------------------------------------------------------------- #
def parse_repository_identifier(origin: str, ssh_prefix: str) -> str:
    """
    Ricava l'identificativo `owner/repo` dall'origin remoto.

    Si presume un URL HTTPS (`scheme://host/path`); se l'origin inizia
    esattamente con `ssh_prefix` (es. `git@github.com:`) si usa ciò che segue.
    Suffissi `.git` e slash iniziali/finali vengono rimossi, quanti che siano.

    Esempi:
        parse_repository_identifier("https://github.com/acme/widget.git", "git@github.com:")
            -> "acme/widget"
        parse_repository_identifier("git@github.com:acme/widget.git", "git@github.com:")
            -> "acme/widget"

    Raises:
        ConfigurationError: se l'identificativo risultante è vuoto.
    """
    origin = origin.strip()

    if origin.startswith(ssh_prefix):
        repo_name = origin[len(ssh_prefix):]
    else:
        repo_name = urlsplit(origin).path

    # ".git" e slash possono alternarsi (es. "widget.git/"): si ripete fino a punto fisso
    while True:
        stripped = repo_name.strip("/")
        if stripped.endswith(".git"):
            stripped = stripped[:-4]
        if stripped == repo_name:
            break
        repo_name = stripped

    if not repo_name:
        safe_origin = redact_url(origin)
        log_event(
            _logger,
            "origin_parse_error",
            {"origin": safe_origin, "ssh_prefix": ssh_prefix},
            level=logging.ERROR,
        )
        raise ConfigurationError(f"Impossibile ricavare owner/repo dall'origin {safe_origin!r}.")

    return repo_name


def require_success_field(response: Any, field: str) -> None:
    """
    Verifica che la risposta (dict JSON) contenga `field`.

    Raises:
        ApiError: con il dump leggibile dell'intera risposta come messaggio.
    """
    if isinstance(response, dict) and response.get(field) is not None:
        return

    message = json.dumps(response, indent=2, ensure_ascii=False, default=str)
    raise ApiError(message, response=response)
