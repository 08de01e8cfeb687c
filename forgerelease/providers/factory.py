# -*- coding: utf-8 -*-
"""
===============================================================================
Modulo: factory.py
Descrizione:
    Selezione del provider a partire dall'origin remoto:
      - host `github.com` → GithubProvider (username + token).
      - host `gitlab.com` → GitlabProvider (token).
    L'host è letto dal prefisso SSH (`git@host:`) o da `urlsplit` per gli URL;
    il path dell'origin non partecipa alla scelta.
    Il risultato è un'unione etichettata: `provider.kind` indica quale dei due.

Autore: Lorenzo Biosa <lorenzo@biosa-labs.com>
Licenza:
    Questo file è rilasciato secondo i termini della licenza del repository.
===============================================================================
"""

from __future__ import annotations

import logging
from typing import Optional, Union
from urllib.parse import urlsplit

import requests

from forgerelease.errors import ConfigurationError
from forgerelease.utils.structured_logging import get_logger, log_event, redact_url

from .base import ProviderKind
from .github import GITHUB_SSH_PREFIX, GithubProvider
from .gitlab import GITLAB_SSH_PREFIX, GitlabProvider

__all__ = ["AnyProvider", "detect_kind", "create_provider"]

AnyProvider = Union[GithubProvider, GitlabProvider]

_HOSTS = {
    "github.com": ProviderKind.GITHUB,
    "gitlab.com": ProviderKind.GITLAB,
}

_SSH_PREFIXES = {
    GITHUB_SSH_PREFIX: ProviderKind.GITHUB,
    GITLAB_SSH_PREFIX: ProviderKind.GITLAB,
}

_logger = get_logger(__name__)


def _origin_host(origin: str) -> str:
    """Host dell'origin: `urlsplit` per gli URL, la parte prima di `:` per la forma scp."""
    if "://" in origin:
        return (urlsplit(origin).hostname or "").lower()
    if ":" in origin:
        return origin.split(":", 1)[0].rsplit("@", 1)[-1].lower()
    return ""


def detect_kind(origin: str) -> ProviderKind:
    """
    Riconosce il provider dall'host dell'origin (HTTPS o SSH).

    Raises:
        ConfigurationError: se l'origin non punta né a GitHub né a GitLab.
    """
    origin = origin.strip()
    for prefix, kind in _SSH_PREFIXES.items():
        if origin.startswith(prefix):
            return kind

    matched = _HOSTS.get(_origin_host(origin))
    if matched is not None:
        return matched

    safe_origin = redact_url(origin)
    log_event(
        _logger,
        "provider_unsupported_origin",
        {"origin": safe_origin},
        level=logging.ERROR,
    )
    raise ConfigurationError(f"Origin non supportato (né GitHub né GitLab): {safe_origin!r}")


def create_provider(
    origin: str,
    *,
    github_username: Optional[str] = None,
    github_token: Optional[str] = None,
    gitlab_token: Optional[str] = None,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = None,
) -> AnyProvider:
    """
    Costruisce il provider adatto all'origin.

    Raises:
        ConfigurationError: origin non supportato o credenziali mancanti per il provider scelto.
    """
    kind = detect_kind(origin)

    if kind is ProviderKind.GITHUB:
        if not github_username or not github_token:
            raise ConfigurationError(
                "Credenziali GitHub mancanti: impostare GH_USERNAME e GH_TOKEN."
            )
        return GithubProvider(
            origin, github_username, github_token, session=session, timeout=timeout
        )

    if not gitlab_token:
        raise ConfigurationError("Token GitLab mancante: impostare GITLAB_TOKEN.")
    return GitlabProvider(origin, gitlab_token, session=session, timeout=timeout)
