"""Replies CLI commands."""

from __future__ import annotations

import argparse

from messagemedia_messages.cli.commands import common
from messagemedia_messages.sdk.client import MessageMediaMessagesClient
from messagemedia_messages.sdk.types import ConfirmRepliesAsReceivedRequest

# Columns shown in table output; the full record is available with --format json.
_TABLE_FIELDS = ("reply_id", "message_id", "date_received", "source_number", "destination_number", "content")


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    check_cmd = subparsers.add_parser("check", help="List replies not yet confirmed")
    check_cmd.add_argument("--format", choices=["table", "json"], default="table")
    check_cmd.set_defaults(_handler=cmd_check)

    confirm_cmd = subparsers.add_parser("confirm", help="Confirm replies as received")
    confirm_cmd.add_argument("reply_ids", nargs="+", metavar="REPLY_ID")
    confirm_cmd.add_argument("--format", choices=["table", "json"], default="table")
    confirm_cmd.set_defaults(_handler=cmd_confirm)


def cmd_check(args: argparse.Namespace) -> int:
    async def _check(client: MessageMediaMessagesClient) -> None:
        result = await client.replies.check_replies()
        if args.format == "json":
            common.emit(result.model_dump(mode="json"), "json")
            return
        rows = [r.model_dump(mode="json", include=set(_TABLE_FIELDS)) for r in result.replies]
        common.emit({"replies": rows}, args.format)

    return common.run_async(common.with_client(_check))


def cmd_confirm(args: argparse.Namespace) -> int:
    async def _confirm(client: MessageMediaMessagesClient) -> None:
        # Preserve order, drop repeats
        reply_ids = list(dict.fromkeys(args.reply_ids))
        result = await client.replies.confirm_replies_as_received(
            ConfirmRepliesAsReceivedRequest(reply_ids=reply_ids)
        )
        if args.format == "json":
            common.emit(result, "json")
            return
        common.emit({"confirmed": len(reply_ids), "response": result}, args.format)

    return common.run_async(common.with_client(_confirm))
