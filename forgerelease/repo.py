# -*- coding: utf-8 -*-
"""
Autore:        Lorenzo Biosa
Email:         lorenzo@biosa-labs.com
Copyright:
  © 2026 Biosa Labs. Tutti i diritti riservati.

Modulo: repo.py
Descrizione:
  Repository Git locale usato dalla CLI come collaboratore dei provider
  (implementa `RepoLike`):
    - get_origin():    URL del remote `origin`.
    - get_branch():    branch corrente, target della release.
    - get_changelog(): contenuto del file di changelog.
    - sync():          dopo una release remota, pull + fetch dei tag
                       per portare in locale il nuovo tag.

Note di implementazione:
  - Accesso al repository via GitPython (`git.Repo`), aperto in modo lazy:
    `issues` con `--origin` esplicito non richiede un working tree.
  - Ogni `GitError` (path inesistente, directory non Git, comando fallito)
    diventa `RepositoryError`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn, Optional, Union

from git import Repo
from git.exc import GitError
from git.remote import Remote

from forgerelease.errors import RepositoryError
from forgerelease.utils.structured_logging import get_logger, log_event

__all__ = ["GitRepo", "DEFAULT_CHANGELOG"]

DEFAULT_CHANGELOG = "CHANGELOG.md"
ORIGIN_REMOTE = "origin"

_logger = get_logger(__name__)


class GitRepo:
    """
    Repository Git su filesystem.

    Attributi:
        path: Radice del working tree.
        changelog: Percorso del changelog, relativo a `path` se non assoluto.
    """

    def __init__(
        self,
        path: Union[str, Path] = ".",
        *,
        changelog: Union[str, Path] = DEFAULT_CHANGELOG,
    ) -> None:
        self.path = Path(path)
        changelog_path = Path(changelog)
        self.changelog = changelog_path if changelog_path.is_absolute() else self.path / changelog_path
        self._repo: Optional[Repo] = None

    def get_origin(self) -> str:
        return self._origin().url

    def get_branch(self) -> str:
        try:
            return self._open().active_branch.name
        except TypeError as exc:
            # GitPython solleva TypeError con HEAD detached
            raise RepositoryError(f"Nessun branch attivo in {self.path}: {exc}") from exc

    def get_changelog(self) -> str:
        """
        Restituisce il testo del changelog così com'è su disco.

        Raises:
            RepositoryError: se il file non esiste o non è leggibile.
        """
        try:
            return self.changelog.read_text(encoding="utf-8")
        except OSError as exc:
            log_event(
                _logger,
                "changelog_unreadable",
                {"path": str(self.changelog), "error_type": type(exc).__name__},
                level=logging.ERROR,
            )
            raise RepositoryError(f"Changelog non leggibile: {self.changelog}") from exc

    def sync(self) -> None:
        remote = self._origin()
        try:
            remote.pull()
            remote.fetch(tags=True)
        except GitError as exc:
            self._fail("sync", exc)
        log_event(_logger, "repo_synced", {"path": str(self.path)})

    # ------------------------------------------------------------------ #
    # Helper
    # ------------------------------------------------------------------ #
    def _open(self) -> Repo:
        if self._repo is None:
            try:
                self._repo = Repo(self.path)
            except GitError as exc:
                self._fail("open", exc)
        return self._repo

    def _origin(self) -> Remote:
        try:
            return self._open().remote(ORIGIN_REMOTE)
        except ValueError as exc:
            raise RepositoryError(f"Remote '{ORIGIN_REMOTE}' assente in {self.path}") from exc

    def _fail(self, operation: str, exc: Exception) -> NoReturn:
        message = str(exc)
        log_event(
            _logger,
            "git_operation_failed",
            {
                "operation": operation,
                "path": str(self.path),
                "error_type": type(exc).__name__,
                "error_message": message,
            },
            level=logging.ERROR,
        )
        raise RepositoryError(f"git {operation} fallito in {self.path}: {message}") from exc

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(path={str(self.path)!r})"
