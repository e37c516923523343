"""Billing Schemas."""

from endpoint_assistant.schemas.base import ApiModel


class BillingStats(ApiModel):
    """Usage and quota snapshot for the authenticated account."""

    tier: str
    parses_this_month: int
    monthly_parse_limit: int
    storage_used: int
    # Sent as a string by the server (64-bit column).
    storage_limit: str
    status: str
    current_period_end: str
