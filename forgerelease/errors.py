# -*- coding: utf-8 -*-
"""
Autore:        Lorenzo Biosa
Email:         lorenzo@biosa-labs.com
Copyright:
  © 2026 Biosa Labs. Tutti i diritti riservati.

Modulo: errors.py
Descrizione:
  Gerarchia delle eccezioni di forgerelease. Tutte derivano da `ForgeError`,
  così la CLI (e i chiamanti) possono intercettarle con un solo `except`.
  Ogni classe eredita anche dall'eccezione built-in più vicina al suo
  significato (ValueError / RuntimeError) per restare compatibile con codice
  che già gestisce quelle.

  Nessun errore viene ritentato o assorbito a questo livello: tutto si propaga
  al chiamante.
"""

from __future__ import annotations

from typing import Any, Optional

__all__ = [
    "ForgeError",
    "ConfigurationError",
    "TransportError",
    "ApiError",
    "RepositoryError",
]


class ForgeError(Exception):
    """Radice di tutte le eccezioni sollevate dal pacchetto."""


class ConfigurationError(ForgeError, ValueError):
    """Origin non interpretabile, host non supportato o credenziali mancanti."""


class TransportError(ForgeError, RuntimeError):
    """
    Errore a livello HTTP: rete non raggiungibile, status non 2xx, body non JSON.

    Attributi:
        status_code: Status HTTP, se una risposta è stata ricevuta.
        url: URL della richiesta, con le credenziali già rimosse.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        url: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class ApiError(ForgeError, RuntimeError):
    """
    La richiesta è andata a buon fine a livello HTTP ma la risposta non contiene
    il campo che indica il successo (`id` per GitHub, `name` per GitLab).

    Il messaggio è il dump leggibile del body; il body originale resta in `response`.
    """

    def __init__(self, message: str, *, response: Any = None) -> None:
        super().__init__(message)
        self.response = response


class RepositoryError(ForgeError, RuntimeError):
    """Un comando `git` del repository locale è fallito o un file atteso manca."""
