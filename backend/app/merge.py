from typing import Any, Dict

from .models import ScoresMap

def overlay_scores(current: Any, incoming: ScoresMap) -> Dict[str, Any]:
    """
    Overlay raso a dois níveis:
      - chaves de topo do documento atual mantêm-se;
      - `scores` é sobreposto chave a chave (jogo novo substitui o antigo por inteiro).
    Documento ou `scores` que não sejam objeto contam como {}.
    """
    base = current if isinstance(current, dict) else {}
    existing = base.get("scores")
    if not isinstance(existing, dict):
        existing = {}

    merged = dict(base)
    merged["scores"] = {**existing, **incoming}
    return merged
