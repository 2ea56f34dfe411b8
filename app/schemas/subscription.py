from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from app.models.profile import SubscriptionTier
from app.models.subscription import BillingCycle, SubscriptionStatus


class Plan(BaseModel):
    tier: SubscriptionTier
    name: str
    description: str
    price: Optional[int] = None
    price_label: str
    monthly_equivalent_label: Optional[str] = None
    savings_label: Optional[str] = None
    monthly_limit: Optional[int] = None
    features: List[str]
    popular: bool = False


class SubscriptionCreate(BaseModel):
    tier: SubscriptionTier
    billing_cycle: BillingCycle = BillingCycle.MONTHLY


class Subscription(BaseModel):
    id: int
    user_id: int
    tier: SubscriptionTier
    status: SubscriptionStatus
    billing_cycle: BillingCycle
    current_period_start: datetime
    current_period_end: datetime
    cancel_at_period_end: bool

    model_config = ConfigDict(from_attributes=True)


class Usage(BaseModel):
    tier: SubscriptionTier
    used_this_month: int
    monthly_limit: Optional[int] = None
