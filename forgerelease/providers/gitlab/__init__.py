# -*- coding: utf-8 -*-
"""
===============================================================================
Pacchetto: forgerelease.providers.gitlab
Descrizione:
    Provider GitLab: elenco issue e creazione tag/release via REST API v3.

Autore: Lorenzo Biosa <lorenzo@biosa-labs.com>
Copyright:
    © 2026 Biosa Labs. Tutti i diritti riservati.
===============================================================================
"""

from __future__ import annotations

from .api import GITLAB_API, GITLAB_SSH_PREFIX, GitlabProvider

__all__ = ["GitlabProvider", "GITLAB_API", "GITLAB_SSH_PREFIX"]
