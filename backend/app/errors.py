from typing import Any, Dict

from .config import REQUIRED_ENV

SCORES_PATH = "scores.json"


class ScoresError(Exception):
    """Erro terminal do pedido: sabe o seu status HTTP e o corpo JSON."""
    status_code = 500
    message = "Internal Server Error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        if message:
            self.message = message

    def body(self) -> Dict[str, Any]:
        return {"error": self.message}


class MethodNotAllowed(ScoresError):
    status_code = 405
    message = "Method Not Allowed"


class Unauthorized(ScoresError):
    status_code = 401
    message = "Unauthorized"


class ServerMisconfigured(ScoresError):
    status_code = 500
    message = "Missing env vars. Required: " + ", ".join(REQUIRED_ENV)


class InvalidPayload(ScoresError):
    status_code = 400
    message = "Invalid payload. Expected { scores: {...} }"


class UpstreamError(ScoresError):
    # O status e o texto do GitHub passam tal e qual
    def __init__(self, status_code: int, detail: str):
        super().__init__()
        self.status_code = status_code
        self.detail = detail

    def body(self) -> Dict[str, Any]:
        return {"error": self.message, "detail": self.detail}


class UpstreamReadError(UpstreamError):
    message = f"Failed to read {SCORES_PATH}"


class UpstreamWriteError(UpstreamError):
    message = f"Failed to update {SCORES_PATH}"
