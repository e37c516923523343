"""Billing Operations."""

from endpoint_assistant.core.client import EndpointsClient, get_client
from endpoint_assistant.schemas.billing import BillingStats


async def get_billing_stats(*, client: EndpointsClient | None = None) -> BillingStats:
    """
    Get billing stats for the current user.

    The server currently accepts session auth only on this route, so API key
    auth may be answered with 401 (raised as APIError).
    """
    client = client or get_client()
    response = await client.get("/api/billing/stats")
    return BillingStats.model_validate(response)
