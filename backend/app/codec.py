import base64, binascii, json, math
from typing import Any, Optional

from .models import Parsed

def _reject_constant(name: str):
    raise ValueError(f"non-standard JSON constant: {name}")

def _finite_float(text: str) -> float:
    value = float(text)
    # 1e999 vira inf: não é JSON válido à saída
    if not math.isfinite(value):
        raise ValueError(f"non-finite number: {text}")
    return value

def strict_loads(text: str) -> Any:
    """json.loads sem NaN/Infinity (nem literais nem por overflow)."""
    return json.loads(text, parse_constant=_reject_constant, parse_float=_finite_float)

def b64encode_utf8(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")

def b64decode_utf8(b64: str) -> str:
    # O GitHub parte o base64 em linhas de 60 chars
    return base64.b64decode("".join(b64.split())).decode("utf-8")

def parse_or_default(b64: Optional[str], default: Any) -> Parsed:
    """
    Descodifica conteúdo base64 -> JSON.
    Qualquer falha (sem conteúdo, base64 inválido, UTF-8 inválido, JSON inválido)
    devolve o default com used_fallback=True. Não levanta.
    """
    if not b64:
        return Parsed(value=default, used_fallback=True)
    try:
        return Parsed(value=strict_loads(b64decode_utf8(b64)))
    except (binascii.Error, ValueError):
        # UnicodeDecodeError e JSONDecodeError são ValueError
        return Parsed(value=default, used_fallback=True)
