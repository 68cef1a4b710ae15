import logging, math, os
from typing import List, Mapping, Optional

from pydantic import BaseModel

# Nomes das variáveis de ambiente
REQUIRED_ENV = ["GITHUB_TOKEN", "GITHUB_OWNER", "GITHUB_REPO", "ADMIN_SECRET"]
DEFAULT_TIMEOUT_S = 15.0

logger = logging.getLogger(__name__)

def _timeout(raw: Optional[str]) -> float:
    if not raw:
        return DEFAULT_TIMEOUT_S
    try:
        value = float(raw)
    except ValueError:
        value = math.nan
    if not math.isfinite(value) or value <= 0:
        logger.warning("Invalid GITHUB_TIMEOUT_S=%r, using %ss", raw, DEFAULT_TIMEOUT_S)
        return DEFAULT_TIMEOUT_S
    return value

class Settings(BaseModel):
    github_token: str = ""
    github_owner: str = ""
    github_repo: str = ""
    admin_secret: str = ""
    github_branch: Optional[str] = None
    github_api_base: str = "https://api.github.com"
    user_agent: str = "scores-admin-updater"
    http_timeout: float = DEFAULT_TIMEOUT_S

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            github_token=env.get("GITHUB_TOKEN", ""),
            github_owner=env.get("GITHUB_OWNER", ""),
            github_repo=env.get("GITHUB_REPO", ""),
            admin_secret=env.get("ADMIN_SECRET", ""),
            github_branch=env.get("GITHUB_BRANCH") or None,
            github_api_base=(env.get("GITHUB_API_BASE") or "https://api.github.com").rstrip("/"),
            user_agent=env.get("SCORES_USER_AGENT") or "scores-admin-updater",
            http_timeout=_timeout(env.get("GITHUB_TIMEOUT_S")),
        )

    def missing(self) -> List[str]:
        """Variáveis obrigatórias do repo que estão vazias."""
        values = {
            "GITHUB_TOKEN": self.github_token,
            "GITHUB_OWNER": self.github_owner,
            "GITHUB_REPO": self.github_repo,
        }
        return [name for name, v in values.items() if not v]
