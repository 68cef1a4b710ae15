import logging
from typing import Optional
from urllib.parse import quote

import httpx

from ..codec import b64encode_utf8
from ..config import Settings
from ..models import ReadResult, RemoteDocument, WriteResult

logger = logging.getLogger(__name__)

class GitHubRepo:
    """Documento versionado via GitHub Contents API (GET lê, PUT faz commit com sha)."""

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self.transport = transport  # para testes (httpx.MockTransport)

    def _url(self, path: str) -> str:
        s = self.settings
        return f"{s.github_api_base}/repos/{s.github_owner}/{s.github_repo}/contents/{quote(path, safe='')}"

    def _headers(self) -> dict:
        return {
            "Authorization": f"token {self.settings.github_token}",
            "Accept": "application/vnd.github+json",
            "User-Agent": self.settings.user_agent,
        }

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.settings.http_timeout, transport=self.transport)

    async def read(self, path: str) -> ReadResult:
        params = {"ref": self.settings.github_branch} if self.settings.github_branch else None
        async with self._client() as client:
            r = await client.get(self._url(path), headers=self._headers(), params=params)
        if not r.is_success:
            logger.error("GET %s -> %s", path, r.status_code)
            return ReadResult(ok=False, status=r.status_code, text=r.text)
        return ReadResult(ok=True, status=r.status_code, text=r.text, document=RemoteDocument(**r.json()))

    async def write(self, path: str, content: str, message: str, sha: Optional[str]) -> WriteResult:
        body = {"message": message, "content": b64encode_utf8(content)}
        if sha:
            body["sha"] = sha
        if self.settings.github_branch:
            body["branch"] = self.settings.github_branch

        async with self._client() as client:
            r = await client.put(self._url(path), headers=self._headers(), json=body)
        if not r.is_success:
            # 409/422 = sha desatualizado (outro commit entretanto); não repetimos
            logger.error("PUT %s -> %s", path, r.status_code)
        return WriteResult(ok=r.is_success, status=r.status_code, text=r.text)
