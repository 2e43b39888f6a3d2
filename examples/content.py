"""Send a content template with a substituted variable.

The template stored in Twilio could look like ``Hello, {{name}}!``; this
script prompts for the recipient and the name to insert.

Environment:
    TWILIO_ACCOUNT_SID  Account SID.
    TWILIO_ACCOUNT_TKN  Account auth token.
    TWILIO_SENDER_NUM   Twilio phone number to send from.
    TWILIO_CONTENT_SID  SID of the content template.

Run with:
    uv run python examples/content.py
"""

from __future__ import annotations

import asyncio
import logging
import os

from fullsend import Client, Message, ProviderError, TwilioMessageSender

logging.basicConfig(level=logging.INFO)


async def main() -> None:
    client = (
        Client.builder()
        .account_sid(os.environ["TWILIO_ACCOUNT_SID"])
        .auth_token(os.environ["TWILIO_ACCOUNT_TKN"])
        .build()
    )

    phone_num = input("phone number> ").strip()
    name = input("name> ").strip()

    message = (
        Message.builder()
        .to(phone_num)
        .from_(os.environ["TWILIO_SENDER_NUM"])
        .content_sid(os.environ["TWILIO_CONTENT_SID"])
        .content_variables({"name": name})
        .build()
    )

    async with TwilioMessageSender() as sender:
        try:
            result = await sender.send(client, message)
        except ProviderError as exc:
            logging.error("Twilio rejected the message: %s", exc)
            return

    logging.info("Message %s accepted with status %s", result.sid, result.status)


if __name__ == "__main__":
    asyncio.run(main())
