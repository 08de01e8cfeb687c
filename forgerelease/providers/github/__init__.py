# -*- coding: utf-8 -*-
"""
===============================================================================
Pacchetto: forgerelease.providers.github
Descrizione:
    Provider GitHub: elenco issue e creazione release via REST API.

Autore: Lorenzo Biosa <lorenzo@biosa-labs.com>
Copyright:
    © 2026 Biosa Labs. Tutti i diritti riservati.
===============================================================================
"""

from __future__ import annotations

from .api import GITHUB_SSH_PREFIX, GithubProvider, is_prerelease

__all__ = ["GithubProvider", "is_prerelease", "GITHUB_SSH_PREFIX"]
