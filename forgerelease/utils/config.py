# -*- coding: utf-8 -*-
"""
===============================================================================
Modulo: config.py
Descrizione:
    Configurazione centralizzata di forgerelease. Fornisce:
      - Parsing tollerante di variabili d'ambiente (bool, float).
      - Dataclass `ForgeSettings` (immutabile) con origin, credenziali,
        changelog, timeout HTTP e preferenze di logging.
      - `get_forge_settings(**override)`: aggrega ENV e override parametrici.
      - Logging strutturato delle impostazioni risolte, senza segreti.

    Variabili d'ambiente:
      - FORGE_ORIGIN       : origin remoto (se assente, la CLI usa `git remote`).
      - GH_USERNAME        : utente GitHub per la basic auth.
      - GH_TOKEN           : token GitHub (fallback: GITHUB_TOKEN).
      - GITLAB_TOKEN       : private token GitLab.
      - FORGE_CHANGELOG    : file di changelog (default: CHANGELOG.md).
      - FORGE_HTTP_TIMEOUT : timeout HTTP in secondi (default: nessuno).
      - LOG_LEVEL          : DEBUG, INFO, WARNING, ERROR, CRITICAL. Default: INFO.
      - LOG_JSON           : "true"/"false" (default: true).

    Linee guida:
      - Non salvare mai segreti nel repository. Usare sempre ENV o Secret manager.
      - Le credenziali mancanti non sono un errore qui: dipende dal provider
        scelto, e la factory solleva ConfigurationError se servono.

Autore: Lorenzo Biosa <lorenzo@biosa-labs.com>
Copyright:
    © 2026 Biosa Labs. Tutti i diritti riservati.
Licenza:
    Questo file è rilasciato secondo i termini della licenza del repository.
===============================================================================
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from .structured_logging import get_logger, log_event, redact_url

__all__ = ["ForgeSettings", "get_forge_settings", "LOG_LEVELS"]

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_logger = get_logger(__name__)


# =============================================================================
# Helper di parsing ENV
# =============================================================================
def _parse_bool(value: Optional[str], *, default: bool = False) -> bool:
    """
    Converte una stringa in booleano in modo tollerante.
    Accetta: "1", "true", "yes", "y", "on" (True) | "0", "false", "no", "n", "off" (False).
    Se None, vuoto o non riconosciuto -> default.
    """
    if value is None:
        return default
    val = value.strip().lower()
    if val in ("1", "true", "yes", "y", "on"):
        return True
    if val in ("0", "false", "no", "n", "off"):
        return False
    return default


def _parse_float(value: Optional[str]) -> Optional[float]:
    """Float positivo o None se assente, non numerico o <= 0."""
    if value is None or not value.strip():
        return None
    try:
        num = float(value.strip())
    except ValueError:
        return None
    return num if num > 0 else None


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip() or None


# =============================================================================
# Impostazioni
# =============================================================================
@dataclass(frozen=True)
class ForgeSettings:
    """
    Impostazioni risolte per una invocazione.

    Provenienza dei valori:
      - Override da parametri funzione
      - Variabili d'ambiente
    """

    origin: Optional[str] = None
    github_username: Optional[str] = None
    github_token: Optional[str] = None
    gitlab_token: Optional[str] = None
    changelog: str = "CHANGELOG.md"
    http_timeout: Optional[float] = None
    log_level: str = "INFO"
    log_json: bool = True

    def __post_init__(self) -> None:
        if not self.changelog.strip():
            raise ValueError("changelog non può essere vuoto.")
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"log_level non valido: {self.log_level!r}")


def get_forge_settings(
    *,
    origin: Optional[str] = None,
    github_username: Optional[str] = None,
    github_token: Optional[str] = None,
    gitlab_token: Optional[str] = None,
    changelog: Optional[str] = None,
    http_timeout: Optional[float] = None,
    log_level: Optional[str] = None,
    log_json: Optional[bool] = None,
) -> ForgeSettings:
    """
    Costruisce le impostazioni aggregando override e ENV (gli override vincono).

    Returns:
        ForgeSettings validato. Un LOG_LEVEL non valido viene riportato a INFO.
    """
    env_origin = _clean(origin) or _clean(os.environ.get("FORGE_ORIGIN"))
    env_username = _clean(github_username) or _clean(os.environ.get("GH_USERNAME"))
    env_gh_token = (
        _clean(github_token)
        or _clean(os.environ.get("GH_TOKEN"))
        or _clean(os.environ.get("GITHUB_TOKEN"))
    )
    env_gl_token = _clean(gitlab_token) or _clean(os.environ.get("GITLAB_TOKEN"))
    env_changelog = (
        _clean(changelog) or _clean(os.environ.get("FORGE_CHANGELOG")) or "CHANGELOG.md"
    )
    env_timeout = (
        http_timeout
        if http_timeout is not None
        else _parse_float(os.environ.get("FORGE_HTTP_TIMEOUT"))
    )
    env_log_json = (
        log_json if log_json is not None else _parse_bool(os.environ.get("LOG_JSON"), default=True)
    )

    _log_level_raw: Optional[str]
    if log_level is not None:
        _log_level_raw = log_level
    else:
        _log_level_raw = os.environ.get("LOG_LEVEL")
    env_log_level = (_log_level_raw or "INFO").strip().upper() or "INFO"

    if env_log_level not in LOG_LEVELS:
        log_event(
            _logger,
            "log_level_normalized",
            {"invalid_level": env_log_level, "normalized_to": "INFO"},
            level=logging.WARNING,
        )
        env_log_level = "INFO"

    settings = ForgeSettings(
        origin=env_origin,
        github_username=env_username,
        github_token=env_gh_token,
        gitlab_token=env_gl_token,
        changelog=env_changelog,
        http_timeout=env_timeout,
        log_level=env_log_level,
        log_json=env_log_json,
    )

    # Solo presenza delle credenziali, mai il valore
    log_event(
        _logger,
        "forge_settings_built",
        {
            "origin": redact_url(settings.origin) if settings.origin else None,
            "github_username_present": bool(settings.github_username),
            "github_token_present": bool(settings.github_token),
            "gitlab_token_present": bool(settings.gitlab_token),
            "changelog": settings.changelog,
            "http_timeout": settings.http_timeout,
            "log_level": settings.log_level,
            "log_json": settings.log_json,
        },
    )
    return settings
