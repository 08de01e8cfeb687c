# -*- coding: utf-8 -*-
"""
===============================================================================
Pacchetto: forgerelease.providers
Descrizione:
    Provider per le API dei forge Git (GitHub, GitLab): elenco issue e
    pubblicazione release dietro un'unica interfaccia.

Linee guida:
    - Non importare automaticamente i sottopacchetti per evitare overhead.
    - Esporre solo il contratto comune; la selezione del provider è in
      `forgerelease.providers.factory`.

Autore: Lorenzo Biosa <lorenzo@biosa-labs.com>
Copyright:
    © 2026 Biosa Labs. Tutti i diritti riservati.
===============================================================================
"""

from __future__ import annotations

from .base import (
    Issue,
    Provider,
    ProviderKind,
    ReleaseRequest,
    RepoLike,
    parse_repository_identifier,
)

__all__ = [
    "Issue",
    "Provider",
    "ProviderKind",
    "ReleaseRequest",
    "RepoLike",
    "parse_repository_identifier",
]
