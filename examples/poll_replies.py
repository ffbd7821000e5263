"""Example: check for replies, process them, then confirm them."""

from __future__ import annotations

import asyncio

from messagemedia_messages import ConfirmRepliesAsReceivedRequest, MessageMediaMessagesClient
from messagemedia_messages.logging_config import setup_logging


async def main() -> None:
    setup_logging()
    async with MessageMediaMessagesClient() as client:
        result = await client.replies.check_replies()
        for reply in result.replies:
            print(f"{reply.date_received} {reply.source_number}: {reply.content}")
        if result.replies:
            await client.replies.confirm_replies_as_received(
                ConfirmRepliesAsReceivedRequest(reply_ids=result.reply_ids)
            )
            print(f"confirmed {len(result.replies)} replies")


if __name__ == "__main__":
    asyncio.run(main())
