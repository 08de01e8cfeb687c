# -*- coding: utf-8 -*-
"""
===============================================================================
Modulo: api.py
Descrizione:
    Provider GitLab (REST API v3 su gitlab.com):
      - `issues()`: elenco delle issue del progetto, in ordine crescente.
      - `release(repo, version)`: crea un tag con release description dal
        branch corrente, poi sincronizza il repository locale.

    Autenticazione:
      - Nessuna credenziale nel base URL: il token viene aggiunto come
        parametro `private_token` alla query di OGNI richiesta, tramite il
        query builder passato al client HTTP.

    Note:
      - L'identificativo `owner/repo` va URL-encoded nei percorsi
        (`/projects/acme%2Fwidget/...`).
      - GitLab non ha il concetto di prerelease: il flag non viene inviato.

Autore: Lorenzo Biosa <lorenzo@biosa-labs.com>
Licenza:
    Questo file è rilasciato secondo i termini della licenza del repository.
===============================================================================
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional
from urllib.parse import quote

import requests

from forgerelease.errors import ApiError
from forgerelease.utils.http_client import ApiHttpClient
from forgerelease.utils.structured_logging import get_logger, log_event

from ..base import (
    HttpLike,
    Issue,
    ProviderKind,
    ReleaseRequest,
    RepoLike,
    parse_repository_identifier,
    require_success_field,
)

__all__ = ["GitlabProvider", "GITLAB_API", "GITLAB_SSH_PREFIX"]

GITLAB_API = "https://gitlab.com/api/v3"
GITLAB_WEB = "https://gitlab.com"
GITLAB_SSH_PREFIX = "git@gitlab.com:"

_logger = get_logger(__name__)


class GitlabProvider:
    """
    Provider per GitLab.

    Attributi:
        kind (ProviderKind): sempre ProviderKind.GITLAB.
        repo_name (str): identificativo `owner/repo`.
        http (HttpLike): client HTTP che applica `build_query` a ogni richiesta.
    """

    kind = ProviderKind.GITLAB

    def __init__(
        self,
        origin: str,
        token: str,
        *,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.base_url = GITLAB_API
        self._token = token
        self.http: HttpLike = ApiHttpClient(
            self.base_url, query_builder=self.build_query, session=session, timeout=timeout
        )
        self.repo_name = parse_repository_identifier(origin, GITLAB_SSH_PREFIX)

        log_event(
            _logger,
            "provider_initialized",
            {"provider": self.kind.value, "repo": self.repo_name},
        )

    def build_query(self, query: Mapping[str, Any]) -> Dict[str, Any]:
        """Aggiunge `private_token` ai parametri di query."""
        params: Dict[str, Any] = dict(query)
        params["private_token"] = self._token
        return params

    @property
    def project_path(self) -> str:
        """Identificativo URL-encoded, usato nei percorsi `/projects/{id}`."""
        return quote(self.repo_name, safe="")

    def issue_url(self, iid: Any) -> str:
        """URL web dell'issue (costruito, non preso dalla risposta API)."""
        return f"{GITLAB_WEB}/{self.repo_name}/issues/{iid}"

    def issues(self) -> List[Issue]:
        """
        Restituisce le issue del progetto nell'ordine dell'API (`sort=asc`).
        Lista vuota se non ce ne sono.
        """
        data: Any = self.http.get(
            f"/projects/{self.project_path}/issues",
            {
                "sort": "asc",
            },
        )

        issues = [
            Issue(number=item["iid"], title=item["title"], url=self.issue_url(item["iid"]))
            for item in data or []
        ]

        log_event(
            _logger,
            "issues_fetched",
            {"provider": self.kind.value, "repo": self.repo_name, "count": len(issues)},
        )
        return issues

    def release(self, repo: RepoLike, version: str) -> None:
        """
        Crea il tag `version` con release description e, se accettato, sincronizza `repo`.

        Raises:
            ApiError: se la risposta non contiene `name` (repo.sync() non viene chiamato).
            TransportError: errori HTTP propagati dal client.
        """
        request = ReleaseRequest(
            tag_name=version,
            target_ref=repo.get_branch(),
            title=version,
            body=repo.get_changelog(),
        )

        log_event(
            _logger,
            "release_submit",
            {
                "provider": self.kind.value,
                "repo": self.repo_name,
                "version": version,
                "target": request.target_ref,
            },
        )

        response: Any = self.http.post(
            f"/projects/{self.project_path}/repository/tags",
            {},
            self._payload(request),
        )

        try:
            require_success_field(response, "name")
        except ApiError:
            log_event(
                _logger,
                "release_rejected",
                {"provider": self.kind.value, "repo": self.repo_name, "version": version},
                level=logging.ERROR,
            )
            raise

        log_event(
            _logger,
            "release_created",
            {
                "provider": self.kind.value,
                "repo": self.repo_name,
                "version": version,
                "tag": response["name"],
            },
        )
        repo.sync()

    def _payload(self, request: ReleaseRequest) -> Dict[str, Any]:
        return {
            "id": self.repo_name,
            "tag_name": request.tag_name,
            "ref": request.target_ref,
            "release_description": request.body,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(repo_name={self.repo_name!r})"
