#!/usr/bin/env python3
"""Send a single notification through the workflow backend.

Identity and backend settings come from ``WORKFLOW_*`` environment
variables (or ``.env``).

Usage examples:
    # Plain email
    uv run python scripts/send_message.py --from noreply@example.com \\
        --to someone@example.com --subject "Hi" --message "Hello there"

    # SMS using a stored template
    uv run python scripts/send_message.py --platform sms --from svc \\
        --to +15555550100 --template-id 6f1c...

    # Check the configured user's contact record
    uv run python scripts/send_message.py --contact
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from uuid import UUID

# Allow running from project root
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from workflow_client import (
    MessagePlatform,
    ReqBodyMessage,
    Workflow,
    WorkflowError,
)
from workflow_client.config import settings

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=getattr(logging, settings.log_level),
)
logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--contact", action="store_true", help="Fetch contact instead of sending")
    parser.add_argument("--from", dest="sender", default="", help="Sender address or name")
    parser.add_argument("--to", default="", help="Recipient address or number")
    parser.add_argument("--subject")
    parser.add_argument("--message")
    parser.add_argument("--template-id", type=UUID)
    parser.add_argument(
        "--platform",
        choices=[p.value for p in MessagePlatform],
        default=MessagePlatform.EMAIL.value,
    )
    parser.add_argument("--broadcast", action="store_true", help="Use send_broadcast_message")
    return parser.parse_args(argv)


async def run(args: argparse.Namespace) -> int:
    async with Workflow.from_settings() as wf:
        notifications = wf.notifications()
        try:
            if args.contact:
                resp = await notifications.fetch_contact()
            else:
                if settings.company_id is None:
                    print("ERROR: WORKFLOW_COMPANY_ID is not set", file=sys.stderr)
                    return 1
                msg = ReqBodyMessage(
                    company_id=settings.company_id,
                    from_=args.sender,
                    to=args.to,
                    subject=args.subject,
                    message=args.message,
                    template_id=args.template_id,
                    platform=MessagePlatform(args.platform),
                )
                send = (
                    notifications.send_broadcast_message
                    if args.broadcast
                    else notifications.send_message
                )
                resp = await send(msg)
        except WorkflowError as exc:
            print(f"ERROR: {exc}", file=sys.stderr)
            return 1

    logger.info("Backend responded with %d", resp.status_code)
    print(json.dumps(resp.response_body, indent=2))
    return 0 if resp.is_success else 1


def main() -> None:
    sys.exit(asyncio.run(run(parse_args())))


if __name__ == "__main__":
    main()
