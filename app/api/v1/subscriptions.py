from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_current_profile
from app.models.profile import Profile as ProfileModel
from app.models.subscription import BillingCycle
from app.schemas.subscription import Plan, Subscription, SubscriptionCreate, Usage
from app.services.subscription import SubscriptionService, get_plan

router = APIRouter()


@router.get("/plans", response_model=List[Plan])
async def read_plans(billing_cycle: BillingCycle = BillingCycle.MONTHLY):
    """Plan catalog priced for the billing cycle"""
    return SubscriptionService.list_plans(billing_cycle)


@router.get("/me", response_model=Optional[Subscription])
async def read_my_subscription(
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(get_current_profile),
):
    return SubscriptionService.get_subscription(db, current_profile.id)


@router.get("/usage", response_model=Usage)
async def read_my_usage(
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(get_current_profile),
):
    """Monthly posts or applications against the plan limit"""
    return {
        "tier": current_profile.subscription_tier,
        "used_this_month": SubscriptionService.monthly_usage(db, current_profile),
        "monthly_limit": get_plan(current_profile.subscription_tier).monthly_limit,
    }


@router.post("/", response_model=Subscription, status_code=status.HTTP_201_CREATED)
async def subscribe(
    subscription: SubscriptionCreate,
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(get_current_profile),
):
    return SubscriptionService.subscribe(db, current_profile, subscription.tier, subscription.billing_cycle)


@router.post("/cancel", response_model=Subscription)
async def cancel_subscription(
    db: Session = Depends(get_db),
    current_profile: ProfileModel = Depends(get_current_profile),
):
    subscription = SubscriptionService.cancel(db, current_profile)
    if subscription is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No active subscription"
        )
    return subscription
