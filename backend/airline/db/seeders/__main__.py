import argparse
import asyncio

from airline.db.database import engine
from airline.db.seeders import SEEDERS, apply_all, resolve, revert_all
from airline.logging_setup import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m airline.db.seeders",
        description="Apply (up) or revert (down) the database seeds.",
    )
    parser.add_argument("action", choices=["up", "down"])
    parser.add_argument(
        "names", nargs="*", metavar="seed",
        help=f"seeds to run (default: all of {', '.join(SEEDERS)})",
    )
    return parser


async def run(action: str, names: list[str]) -> dict[str, int]:
    runner = apply_all if action == "up" else revert_all
    try:
        return await runner(names)
    finally:
        await engine.dispose()


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        names = resolve(args.names)
    except ValueError as exc:
        parser.error(str(exc))

    setup_logging()
    asyncio.run(run(args.action, names))


if __name__ == "__main__":
    main()
