# -*- coding: utf-8 -*-
"""
===============================================================================
Pacchetto: forgerelease.utils
Descrizione:
    Utilità comuni riutilizzabili:
      - Logging strutturato (setup_logging/get_logger/log_event).
      - Configurazione da ENV (ForgeSettings).
      - Client HTTP JSON per le API dei provider (ApiHttpClient).

Autore: Lorenzo Biosa <lorenzo@biosa-labs.com>
Copyright:
    © 2026 Biosa Labs. Tutti i diritti riservati.
===============================================================================
"""

from __future__ import annotations

from .config import ForgeSettings, get_forge_settings
from .structured_logging import get_logger, log_event, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
    "log_event",
    "ForgeSettings",
    "get_forge_settings",
]
