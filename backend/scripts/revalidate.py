"""
Ask a running site to re-render cached pages.

Usage:
    cd backend
    python -m scripts.revalidate /games /games/ys-origin --token <jwt>
"""
from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

import requests

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from beyond_ys.db_mongo import settings

TOKEN_ENV = "REVALIDATE_TOKEN"


def revalidate_paths(paths: list[str], token: str, site_url: str | None = None, timeout: float = 30) -> dict:
    response = requests.post(
        f"{(site_url or settings.site_url).rstrip('/')}/api/revalidate",
        json={"paths": paths},
        headers={"Authorization": f"Bearer {token}"},
        timeout=timeout,
    )
    response.raise_for_status()
    return response.json()


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Revalidate cached pages")
    parser.add_argument("paths", nargs="+")
    parser.add_argument("--token", type=str, default=os.environ.get(TOKEN_ENV, ""))
    parser.add_argument("--site-url", type=str, default=None)
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    if not args.token:
        raise SystemExit(f"A token is required (--token or {TOKEN_ENV}).")
    try:
        result = revalidate_paths(args.paths, args.token, args.site_url)
    except requests.RequestException as exc:
        raise SystemExit(f"Revalidation failed: {exc}")
    print(result.get("message", result))


if __name__ == "__main__":
    main()
