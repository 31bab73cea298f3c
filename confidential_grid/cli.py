"""
CLI - Command-line interface for players and the server

Usage:
    python -m confidential_grid serve
    python -m confidential_grid --identity alice join
    python -m confidential_grid --identity alice place-building --position 4 --building 2
    python -m confidential_grid --identity alice decrypt-balance
    python -m confidential_grid --identity alice decrypt-tile --position 4
    python -m confidential_grid --identity alice decrypt-status
    python -m confidential_grid --identity alice board
"""

import argparse
import asyncio
import sys
from typing import List, Optional

import httpx
from rich.console import Console
from rich.table import Table

from confidential_grid.config import GAME_CONFIG
from confidential_grid.network import GameNetworkClient
from confidential_grid.service.rules import (
    BUILDING_COSTS,
    BUILDING_TYPES,
    building_name,
    status_message,
)

console = Console()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="confidential-grid",
        description="Build in secret. Pay with encrypted gold.",
    )
    parser.add_argument("--identity", help="Player identity (required for player commands)")
    parser.add_argument("--address", help="Server address (default from config)")

    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the HTTP server")
    serve.add_argument("--backend", choices=["mock", "binfhe"], help="Crypto backend")
    serve.add_argument("--port", type=int, help="Port to listen on")

    sub.add_parser("join", help="Join the game and receive encrypted gold")

    place = sub.add_parser("place-building", help="Place an encrypted building")
    place.add_argument("--position", type=int, required=True, help="Tile position 0-8")
    place.add_argument("--building", type=int, required=True, help="Building type 1-4")

    sub.add_parser("decrypt-balance", help="Decrypt your gold")

    tile = sub.add_parser("decrypt-tile", help="Decrypt one tile")
    tile.add_argument("--position", type=int, required=True, help="Tile position 0-8")

    sub.add_parser("decrypt-status", help="Decrypt the last placement result")
    sub.add_parser("board", help="Decrypt and show your whole board")

    return parser


def validate_args(args: argparse.Namespace) -> Optional[str]:
    """Return an error message for bad arguments, None if they are fine"""
    if args.command != "serve" and not args.identity:
        return "--identity is required"

    grid_size = GAME_CONFIG["grid_size"]
    position = getattr(args, "position", None)
    if position is not None and not 0 <= position < grid_size:
        return f"position must be between 0 and {grid_size - 1}"

    building = getattr(args, "building", None)
    if building is not None and building not in BUILDING_TYPES:
        return f"building must be one of {', '.join(str(t) for t in BUILDING_TYPES)}"

    return None


def render_board(tiles: List[int]) -> Table:
    """3x3 rich table of decrypted tiles"""
    table = Table(title="Your board", show_lines=True)
    width = int(len(tiles) ** 0.5)
    for col in range(width):
        table.add_column(str(col), justify="center")
    for row in range(width):
        cells = []
        for col in range(width):
            position = row * width + col
            cells.append(f"[dim]{position}[/dim] {building_name(tiles[position])}")
        table.add_row(*cells)
    return table


async def run_command(args: argparse.Namespace, client: GameNetworkClient) -> int:
    if args.command == "join":
        await client.join()
        console.print(f"Joined game as [bold]{client.identity}[/bold]")

    elif args.command == "place-building":
        result = await client.place_building(args.position, args.building)
        console.print(
            f"Placed building {args.building} ({building_name(args.building)}, "
            f"{BUILDING_COSTS[args.building]} gold) at position {args.position}"
        )
        console.print(f"Status handle: {result['status']['handle']}")

    elif args.command == "decrypt-balance":
        console.print(f"Decrypted balance: {await client.decrypt_balance()}")

    elif args.command == "decrypt-tile":
        value = await client.decrypt_tile(args.position)
        console.print(f"Decrypted value: {value} ({building_name(value)})")

    elif args.command == "decrypt-status":
        status = await client.decrypt_status()
        console.print(f"Last placement: {status} ({status_message(status)})")

    elif args.command == "board":
        console.print(render_board(await client.decrypt_board()))
        console.print(f"Gold: {await client.decrypt_balance()}")

    return 0


def serve(args: argparse.Namespace) -> int:
    from confidential_grid.main import GameEngine

    engine = GameEngine(backend_name=args.backend, http_port=args.port)
    engine.start_http_server(background=False)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    error = validate_args(args)
    if error:
        parser.error(error)

    if args.command == "serve":
        return serve(args)

    client = GameNetworkClient(args.identity, address=args.address)
    try:
        return asyncio.run(run_command(args, client))
    except httpx.HTTPStatusError as e:
        console.print(f"[red]Request failed:[/red] {e.response.text}")
        return 1
    except httpx.HTTPError as e:
        console.print(f"[red]Server unreachable:[/red] {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
