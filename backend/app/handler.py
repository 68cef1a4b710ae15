import json, logging
from typing import Mapping, Protocol

from .codec import parse_or_default, strict_loads
from .config import Settings
from .errors import (
    SCORES_PATH, InvalidPayload, MethodNotAllowed, ScoresError, ServerMisconfigured,
    Unauthorized, UpstreamReadError, UpstreamWriteError,
)
from .merge import overlay_scores
from .models import HandlerResult, ReadResult, WriteResult

logger = logging.getLogger(__name__)

COMMIT_MESSAGE = f"Update {SCORES_PATH} (admin)"
SECRET_HEADERS = ("x-admin-secret", "X-Admin-Secret")

class DocumentStore(Protocol):
    async def read(self, path: str) -> ReadResult: ...
    async def write(self, path: str, content: str, message: str, sha: str | None) -> WriteResult: ...

def header_secret(headers: Mapping[str, str]) -> str:
    for name in SECRET_HEADERS:
        if headers.get(name):
            return headers[name]
    # Fallback para outras capitalizações (ex: X-ADMIN-SECRET)
    for name, value in headers.items():
        if name.lower() == SECRET_HEADERS[0] and value:
            return value
    return ""

def parse_incoming(body: str | None) -> dict:
    try:
        payload = strict_loads(body or "{}")
    except ValueError:
        raise InvalidPayload() from None
    scores = payload.get("scores") if isinstance(payload, dict) else None
    # null e array são rejeitados explicitamente
    if isinstance(scores, list) or not isinstance(scores, dict):
        raise InvalidPayload()
    return scores

class ScoreUpdateHandler:
    def __init__(self, settings: Settings, store: DocumentStore):
        self.settings = settings
        self.store = store

    async def handle(self, method: str, headers: Mapping[str, str], body: str | None) -> HandlerResult:
        try:
            await self._run(method, headers, body)
        except ScoresError as e:
            return HandlerResult(status=e.status_code, body=e.body())
        except Exception as e:
            logger.exception("Unhandled error while updating %s", SCORES_PATH)
            return HandlerResult(status=500, body={"error": str(e)})
        return HandlerResult(status=200, body={"ok": True})

    async def _run(self, method: str, headers: Mapping[str, str], body: str | None) -> None:
        # --- GATES ---
        if method != "POST":
            raise MethodNotAllowed()

        server_secret = self.settings.admin_secret or ""
        if not server_secret or header_secret(headers) != server_secret:
            logger.warning("Rejected scores update: bad or missing admin secret")
            raise Unauthorized()

        missing = self.settings.missing()
        if missing:
            logger.error("Scores updater misconfigured, missing: %s", ", ".join(missing))
            raise ServerMisconfigured()

        incoming = parse_incoming(body)

        # 1) Ler documento atual + sha
        current = await self.store.read(SCORES_PATH)
        if not current.ok:
            raise UpstreamReadError(current.status, current.text)

        doc = current.document
        parsed = parse_or_default(doc.content if doc else None, {})
        if parsed.used_fallback:
            logger.info("%s empty or unreadable, starting from {}", SCORES_PATH)

        # 2) Merge + commit
        merged = overlay_scores(parsed.value, incoming)
        new_content = json.dumps(merged, indent=2, ensure_ascii=False, allow_nan=False)

        written = await self.store.write(SCORES_PATH, new_content, COMMIT_MESSAGE, doc.sha if doc else None)
        if not written.ok:
            raise UpstreamWriteError(written.status, written.text)

        logger.info("Updated %d game(s) in %s", len(incoming), SCORES_PATH)
