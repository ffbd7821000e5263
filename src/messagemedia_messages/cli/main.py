"""Argument-based CLI entrypoint for the replies client."""

from __future__ import annotations

import argparse
import sys

from pydantic import ValidationError

from messagemedia_messages.cli.commands import replies
from messagemedia_messages.config import Configuration
from messagemedia_messages.logging_config import setup_logging


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mm-replies",
        description="MessageMedia replies: check received replies and confirm them.",
    )
    subparsers = parser.add_subparsers(dest="command")

    replies.register(subparsers)
    return parser


def main(argv: list[str] | None = None) -> None:
    try:
        configuration = Configuration()
    except ValidationError as exc:
        print(f"error: invalid configuration: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    setup_logging(configuration)
    parser = _build_parser()
    args = parser.parse_args(argv)
    if not getattr(args, "command", None):
        parser.print_help()
        raise SystemExit(0)

    handler = getattr(args, "_handler", None)
    if handler is None:
        parser.print_help()
        raise SystemExit(1)

    code = int(handler(args) or 0)
    raise SystemExit(code)


if __name__ == "__main__":
    main()
