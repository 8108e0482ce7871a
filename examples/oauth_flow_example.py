"""
Example: authorize against FreshBooks and work with invoices.

Run with FRESHBOOKS_CLIENT_ID, FRESHBOOKS_CLIENT_SECRET and
FRESHBOOKS_REDIRECT_URI set. The script prints the authorization URL, reads
the code from the redirect, then lists the first page of invoices of the
first business the user belongs to.
"""

import asyncio
import logging

from freshbooks_sdk import FreshBooksClient
from freshbooks_sdk import FreshBooksSettings
from freshbooks_sdk import NotFoundError
from freshbooks_sdk.logging_middleware import LoggingMiddleware

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def main():
    settings = FreshBooksSettings()

    async with FreshBooksClient(settings, middlewares=[LoggingMiddleware()]) as client:
        print("Visit:", client.authorization_url(["user:profile:read", "user:invoices:read"]))
        code = input("Authorization code: ").strip()

        token = await client.get_access_token(code)
        logger.info("Access token valid until %s", token.expires_at)

        identity = await client.current_identity()
        account_id = identity.business_memberships[0].business.account_id
        logger.info("Signed in as %s, account %s", identity.full_name, account_id)

        invoices = await client.invoices.list(account_id, page=1, per_page=10)
        for invoice in invoices.items:
            logger.info("Invoice %s: %s", invoice.invoice_number, invoice.amount)

        try:
            await client.invoices.get(account_id, 0)
        except NotFoundError as exc:
            logger.info("Expected miss: %s", exc)


if __name__ == "__main__":
    asyncio.run(main())
