from typing import Any, Dict, Generic, Optional, TypeVar
from pydantic import BaseModel

T = TypeVar("T")

# Um registo de jogo é livre (ex: {"home": 1, "away": 2})
ScoreRecord = Dict[str, Any]
ScoresMap = Dict[str, ScoreRecord]

class RemoteDocument(BaseModel):
    # Resposta do GET /contents (só os campos que usamos)
    content: Optional[str] = None
    sha: Optional[str] = None

class ReadResult(BaseModel):
    ok: bool
    status: int
    text: str = ""
    document: Optional[RemoteDocument] = None

class WriteResult(BaseModel):
    ok: bool
    status: int
    text: str = ""

class Parsed(BaseModel, Generic[T]):
    value: T
    used_fallback: bool = False

class HandlerResult(BaseModel):
    status: int
    body: Dict[str, Any]
