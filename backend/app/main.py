import logging

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from .config import Settings
from .handler import ScoreUpdateHandler
from .repo.github import GitHubRepo

# --- LOGGING ---
logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

# --- CONFIG ---
# Lida do ambiente em cada pedido (nada é guardado entre pedidos)
def get_settings() -> Settings:
    return Settings.from_env()

def get_store(settings: Settings = Depends(get_settings)) -> GitHubRepo:
    return GitHubRepo(settings)

app = FastAPI(title="Scores Admin Updater", version="1.0.0")

NO_STORE = {"Cache-Control": "no-store"}
ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]

# --- ENDPOINTS ---

@app.get("/health")
def health(settings: Settings = Depends(get_settings)):
    return {"status": "ok", "configured": not settings.missing() and bool(settings.admin_secret)}

# Aceita todos os métodos: o 405 é decidido pelo handler (corpo JSON próprio)
@app.api_route("/api/update-scores", methods=ALL_METHODS)
@app.api_route("/.netlify/functions/updateScores", methods=ALL_METHODS)
async def update_scores(
    request: Request,
    settings: Settings = Depends(get_settings),
    store: GitHubRepo = Depends(get_store),
):
    raw = await request.body()
    body = raw.decode("utf-8", errors="replace") if raw else ""

    handler = ScoreUpdateHandler(settings, store)
    result = await handler.handle(request.method, request.headers, body)
    return JSONResponse(status_code=result.status, content=result.body, headers=NO_STORE)
