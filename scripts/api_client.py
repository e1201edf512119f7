"""Lightweight REST client for the padelstats API.

Start a server first, e.g. ``uvicorn padelstats.api:create_app --factory``.
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the padelstats REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("payload", type=Path, nargs="?", help="Raw payload or envelope JSON file")
    parser.add_argument("--match-id", default=None, help="Match identifier to attach")
    parser.add_argument("--user-id", default=None, help="Requesting user identifier to attach")
    parser.add_argument("--transform-only", action="store_true", help="Return the envelope without match context")
    parser.add_argument("--health", action="store_true", help="Check service health and exit")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.health:
            resp = client.get("/health")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return

        if args.payload is None:
            raise SystemExit("payload file is required")
        try:
            payload = json.loads(args.payload.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise SystemExit(f"Invalid payload JSON: {exc}") from exc

        if args.transform_only:
            resp = client.post("/analysis/transform", json=payload)
        else:
            resp = client.post(
                "/analysis/format",
                json={"payload": payload, "match_id": args.match_id, "user_id": args.user_id},
            )
        if resp.status_code in (400, 422):
            raise SystemExit(f"analysis rejected: {resp.json().get('detail')}")
        resp.raise_for_status()
        print(json.dumps(resp.json(), indent=2))


if __name__ == "__main__":
    main()
