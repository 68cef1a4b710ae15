"""Envia um update de scores para o endpoint admin.

Exemplos:
  python scripts/push_scores.py --url https://site/.netlify/functions/updateScores --game g1 --home 2 --away 1
  python scripts/push_scores.py --url http://localhost:8000/api/update-scores --file update.json
"""
from __future__ import annotations

from pathlib import Path
import os, sys, json, argparse, asyncio
import httpx

# ---------- Payload ----------
def build_payload(args) -> dict:
    if args.file:
        data = json.loads(Path(args.file).read_text("utf-8"))
        # Aceita tanto {"scores": {...}} como só o mapa de jogos
        scores = data.get("scores", data) if isinstance(data, dict) else None
        if not isinstance(scores, dict):
            raise SystemExit(f"{args.file}: esperado um objeto JSON com jogos")
        return {"scores": scores}

    if not args.game:
        raise SystemExit("Indica --game ou --file")
    return {"scores": {args.game: {"home": args.home, "away": args.away}}}

# ---------- HTTP ----------
async def push(url: str, secret: str, payload: dict, timeout: float = 30) -> httpx.Response:
    async with httpx.AsyncClient(timeout=timeout) as client:
        return await client.post(url, json=payload, headers={"x-admin-secret": secret})

# ---------- Main ----------
def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--url", required=True)
    ap.add_argument("--secret", default=os.environ.get("ADMIN_SECRET", ""))
    ap.add_argument("--file", default="")
    ap.add_argument("--game", default="")
    ap.add_argument("--home", type=int, default=0)
    ap.add_argument("--away", type=int, default=0)
    args = ap.parse_args()

    payload = build_payload(args)
    r = asyncio.run(push(args.url, args.secret, payload))
    print(f"{r.status_code} {r.text}")
    sys.exit(0 if r.is_success else 1)

if __name__ == "__main__":
    main()
