"""Send a plain-text SMS.

Reads credentials from the environment, prompts for the recipient's phone
number, and sends a short greeting from your Twilio number.

Environment:
    TWILIO_ACCOUNT_SID  Account SID.
    TWILIO_ACCOUNT_TKN  Account auth token.
    TWILIO_SENDER_NUM   Twilio phone number to send from.

Run with:
    uv run python examples/simple.py
"""

from __future__ import annotations

import asyncio
import logging
import os

from fullsend import Client, Message, send_message

logging.basicConfig(level=logging.INFO)


async def main() -> None:
    client = (
        Client.builder()
        .account_sid(os.environ["TWILIO_ACCOUNT_SID"])
        .auth_token(os.environ["TWILIO_ACCOUNT_TKN"])
        .build()
    )

    phone_num = input("phone number> ").strip()
    message = (
        Message.builder()
        .to(phone_num)
        .from_(os.environ["TWILIO_SENDER_NUM"])
        .body("howdy from fullsend!")
        .build()
    )

    result = await send_message(client, message)
    logging.info("Message %s accepted with status %s", result.sid, result.status)


if __name__ == "__main__":
    asyncio.run(main())
