# -*- coding: utf-8 -*-
"""
===============================================================================
Pacchetto: forgerelease
Descrizione:
    Strato minimo sopra le API di GitHub e GitLab per:
      - elencare le issue aperte di un progetto,
      - pubblicare una release/tag a partire da una stringa di versione.
    Contiene:
      - Provider GitHub/GitLab con interfaccia comune (forgerelease.providers).
      - Utilità comuni (config, logging, HTTP).
      - Entrypoint CLI (vedi forgerelease/main.py).

Note:
    Questo __init__ definisce metadati e versione del pacchetto. Evitare import
    pesanti o esecuzione di codice con side-effect.

Autore: Lorenzo Biosa <lorenzo@biosa-labs.com>
Copyright:
    © 2026 Biosa Labs. Tutti i diritti riservati.
Licenza:
    Vedi LICENSE alla radice del repository.
===============================================================================
"""

from __future__ import annotations

# Metadati pacchetto
__title__ = "forgerelease"
__author__ = "Lorenzo Biosa"
__email__ = "lorenzo@biosa-labs.com"
__license__ = "Repository License"
__version__ = "0.1.0"

__all__ = [
    "__title__",
    "__author__",
    "__email__",
    "__license__",
    "__version__",
]
