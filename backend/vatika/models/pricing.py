"""Pydantic v2 models for delivery-time pricing."""

from pydantic import BaseModel


class DeliveryTier(BaseModel):
    """One anchor point of the delivery discount table."""

    model_config = {"frozen": True}

    days: int
    label: str
    discount_percent: int
    multiplier: float
    description: str


class DeliveryQuote(BaseModel):
    """A total priced for a chosen delivery lead time."""

    days: float
    multiplier: float
    discount_percent: int
    original_total: int
    discounted_total: int
    savings: int
    tier: DeliveryTier
