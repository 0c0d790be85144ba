"""GitLab API client using httpx."""

from __future__ import annotations

import json
import logging
from typing import Any
from urllib.parse import quote

import httpx

from .config import GitLabConfig
from .exceptions import GitLabApiError, GitLabAuthError, GitLabNotFoundError

logger = logging.getLogger(__name__)


class GitLabClient:
    """Async HTTP client for the merge request and pipeline endpoints of the GitLab REST API v4."""

    def __init__(self, config: GitLabConfig | None = None) -> None:
        self.config = config or GitLabConfig.from_env()
        self.config.validate()
        self._client = httpx.AsyncClient(
            base_url=self.config.api_url,
            headers={
                "PRIVATE-TOKEN": self.config.token,
                "Content-Type": "application/json",
            },
            timeout=self.config.timeout,
            verify=self.config.ssl_verify,
        )

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> GitLabClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    # ── HTTP helpers ──────────────────────────────────────────────

    @staticmethod
    def _encode_id(project_id: str | int) -> str:
        """Encode a project ID. Numeric IDs pass through; paths are URL-encoded."""
        if isinstance(project_id, int):
            return str(project_id)
        try:
            return str(int(project_id))
        except ValueError:
            return quote(project_id, safe="")

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json_data: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Make an API request and return parsed JSON."""
        kwargs: dict[str, Any] = {"params": params}
        if json_data is not None:
            kwargs["json"] = json_data

        logger.debug("%s %s", method, path)
        resp = await self._client.request(method, path, **kwargs)

        if resp.status_code in (401, 403):
            raise GitLabAuthError(resp.status_code, resp.text)
        if resp.status_code == 404:
            raise GitLabNotFoundError(resp.text)
        if not resp.is_success:
            raise GitLabApiError(resp.status_code, resp.reason_phrase or "", resp.text)

        if resp.status_code == 204 or not resp.content:
            return None

        content_type = resp.headers.get("content-type", "")
        if "text/html" in content_type:
            msg = "Unexpected HTML response — check URL and authentication"
            raise GitLabApiError(resp.status_code, msg, resp.text[:500])

        try:
            return resp.json()
        except json.JSONDecodeError as e:
            raise GitLabApiError(
                resp.status_code,
                f"JSON parse error: {e}",
                resp.text[:500],
            ) from e

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return await self._request("GET", path, params=params)

    async def post(self, path: str, json_data: Any = None) -> Any:
        return await self._request("POST", path, json_data=json_data)

    async def put(self, path: str, json_data: Any = None) -> Any:
        return await self._request("PUT", path, json_data=json_data)

    # ── Merge Requests ────────────────────────────────────────────

    async def list_merge_requests(
        self, project_id: str | int, params: dict[str, Any] | None = None
    ) -> list[dict]:
        enc = self._encode_id(project_id)
        p = {"per_page": 20, **(params or {})}
        return await self.get(f"/projects/{enc}/merge_requests", params=p)

    async def create_merge_request(self, project_id: str | int, params: dict[str, Any]) -> dict:
        enc = self._encode_id(project_id)
        return await self.post(f"/projects/{enc}/merge_requests", params)

    async def update_merge_request(
        self, project_id: str | int, mr_iid: int, params: dict[str, Any]
    ) -> dict:
        enc = self._encode_id(project_id)
        return await self.put(f"/projects/{enc}/merge_requests/{mr_iid}", params)

    # ── Pipelines ─────────────────────────────────────────────────

    async def list_pipelines(
        self, project_id: str | int, params: dict[str, Any] | None = None
    ) -> list[dict]:
        enc = self._encode_id(project_id)
        p = {"per_page": 20, **(params or {})}
        return await self.get(f"/projects/{enc}/pipelines", params=p)
