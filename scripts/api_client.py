"""Lightweight REST client for the pyroster API."""

from __future__ import annotations

import argparse
import json

import httpx


def _print_roster(payload: dict) -> None:
    sort = payload["sort"]
    print(f"Sorted by {sort['field']} ({sort['direction']})")
    for player in payload["players"]:
        print(f"{player['id']}\t{player['name']}\t{player['position']}\t{player['year']}\t{player['rating']}")


def _raise_for_errors(resp: httpx.Response) -> None:
    if resp.status_code == 422:
        detail = resp.json()["detail"]
        lines = [detail["message"]] + [f"  {field}: {message}" for field, message in detail["errors"].items()]
        raise SystemExit("\n".join(lines))
    if resp.status_code == 404:
        raise SystemExit(resp.json()["detail"])
    resp.raise_for_status()


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the pyroster REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("--sort", metavar="FIELD", help="Request a sort on FIELD before listing")
    parser.add_argument(
        "--add",
        nargs=4,
        metavar=("NAME", "POSITION", "YEAR", "RATING"),
        help="Add a player before listing",
    )
    parser.add_argument("--remove", type=int, metavar="PLAYER_ID", help="Remove a player before listing")
    parser.add_argument("--profile", action="store_true", help="Print the coach profile")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.add:
            name, position, year, rating = args.add
            resp = client.post(
                "/players",
                json={"name": name, "position": position, "year": year, "rating": rating},
            )
            _raise_for_errors(resp)
            print(resp.json()["message"])
        if args.remove is not None:
            resp = client.delete(f"/players/{args.remove}")
            _raise_for_errors(resp)
        if args.profile:
            resp = client.get("/profile")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))

        if args.sort:
            resp = client.post(f"/sort/{args.sort}")
        else:
            resp = client.get("/players")
        _raise_for_errors(resp)
        _print_roster(resp.json())


if __name__ == "__main__":
    main()
