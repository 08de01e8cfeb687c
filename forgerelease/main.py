# -*- coding: utf-8 -*-
"""
Autore:        Lorenzo Biosa
Email:         lorenzo@biosa-labs.com
Copyright:
  © 2026 Biosa Labs. Tutti i diritti riservati.

Modulo: main.py
Descrizione:
  Entrypoint CLI di forgerelease. Subcomandi:
    - `issues`:          elenca le issue aperte del progetto remoto.
    - `release VERSION`: pubblica la release VERSION dal branch corrente,
                         con il changelog come descrizione.

  Il provider (GitHub o GitLab) è scelto dall'origin: `--origin`, poi
  FORGE_ORIGIN, poi `git remote get-url origin` nel repository locale.
  Le credenziali arrivano solo da ENV (vedi forgerelease/utils/config.py).

  Osservabilità:
    - Logging centralizzato via forgerelease.utils.structured_logging:
        * JSON strutturato (default) o plain text (LOG_JSON=false / --no-log-json).
        * Livello configurabile via LOG_LEVEL / --log-level.
    - Nessun log di segreti (token).

  Codici di uscita: 0 successo, 1 errore (ForgeError).
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from forgerelease import __version__
from forgerelease.errors import ForgeError
from forgerelease.providers.factory import AnyProvider, create_provider
from forgerelease.repo import GitRepo
from forgerelease.utils.config import LOG_LEVELS, ForgeSettings, get_forge_settings
from forgerelease.utils.structured_logging import (
    get_logger,
    log_event,
    request_id_context,
    scoped_context,
    setup_logging,
)

_logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="forgerelease",
        description="Issue e release su GitHub/GitLab per il repository corrente.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--origin", type=str, help="Origin remoto (HTTPS o SSH)")
    parser.add_argument(
        "--repo-path",
        type=str,
        default=".",
        help="Percorso del repository locale (default: directory corrente)",
    )

    # Opzioni logging (override opzionali)
    parser.add_argument(
        "--log-level",
        type=str,
        choices=list(LOG_LEVELS),
        help="Livello di logging",
    )
    parser.add_argument(
        "--log-json",
        dest="log_json",
        action="store_true",
        help="Abilita logging in formato JSON",
    )
    parser.add_argument(
        "--no-log-json",
        dest="log_json",
        action="store_false",
        help="Disabilita logging in formato JSON",
    )
    parser.set_defaults(log_json=None)

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("issues", help="Elenca le issue aperte")
    rel = sub.add_parser("release", help="Pubblica una release")
    rel.add_argument("release_version", metavar="VERSION", help="Versione/tag da pubblicare")

    return parser


def _resolve_provider(settings: ForgeSettings, repo: GitRepo) -> AnyProvider:
    origin = settings.origin or repo.get_origin()
    return create_provider(
        origin,
        github_username=settings.github_username,
        github_token=settings.github_token,
        gitlab_token=settings.gitlab_token,
        timeout=settings.http_timeout,
    )


def cmd_issues(provider: AnyProvider) -> None:
    issues = provider.issues()
    if not issues:
        print("Nessuna issue aperta.")
        return
    for issue in issues:
        print(f"#{issue.number}  {issue.title}")
        print(f"    {issue.url}")


def cmd_release(provider: AnyProvider, repo: GitRepo, version: str) -> None:
    provider.release(repo, version)
    print(f"Release {version} pubblicata su {provider.kind.value} ({provider.repo_name}).")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Entrypoint CLI. Restituisce il codice di uscita.
    """
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    settings = get_forge_settings(
        origin=args.origin,
        log_level=args.log_level,
        log_json=args.log_json,
    )

    # Riconfigurazione con i valori risolti (i moduli importati hanno già fatto il setup di default)
    setup_logging(
        level=settings.log_level, json_mode=settings.log_json, console=True, force=True
    )

    repo = GitRepo(args.repo_path, changelog=settings.changelog)

    with request_id_context():
        log_event(_logger, "cli_invocation", {"command": args.command})
        try:
            provider = _resolve_provider(settings, repo)
            with scoped_context(provider=provider.kind.value, repo=provider.repo_name):
                if args.command == "issues":
                    cmd_issues(provider)
                else:
                    cmd_release(provider, repo, args.release_version)
        except ForgeError as exc:
            log_event(
                _logger,
                "cli_error",
                {
                    "command": args.command,
                    "error_type": type(exc).__name__,
                    "error_message": str(exc),
                },
                level=logging.ERROR,
            )
            print(f"ERROR: {exc}", file=sys.stderr)
            return 1

    log_event(_logger, "cli_complete", {"command": args.command})
    return 0


def run() -> None:
    """Entrypoint del console script."""
    sys.exit(main())


if __name__ == "__main__":
    run()
