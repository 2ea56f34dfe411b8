import calendar
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.errors import QuotaExceededError, ValidationFailed
from app.models.application import Application
from app.models.profile import Profile, SubscriptionTier, UserType
from app.models.project import Project
from app.models.subscription import BillingCycle, Subscription, SubscriptionStatus

logger = logging.getLogger(__name__)

YEARLY_SAVINGS_LABEL = "Save 17%"


@dataclass(frozen=True)
class Plan:
    tier: SubscriptionTier
    name: str
    description: str
    monthly_price: Optional[int]  # None means priced by sales
    yearly_price: Optional[int]
    monthly_limit: Optional[int]  # applications or posts per month, None is unlimited
    features: Tuple[str, ...]
    popular: bool = False

    def price(self, cycle: BillingCycle) -> Optional[int]:
        return self.yearly_price if cycle == BillingCycle.YEARLY else self.monthly_price

    def price_label(self, cycle: BillingCycle) -> str:
        price = self.price(cycle)
        if price is None:
            return "Contact Sales"
        if price == 0:
            return "Free"
        unit = "year" if cycle == BillingCycle.YEARLY else "month"
        return f"${price}/{unit}"

    def monthly_equivalent_label(self, cycle: BillingCycle) -> Optional[str]:
        if cycle != BillingCycle.YEARLY or not self.yearly_price:
            return None
        return f"${round(self.yearly_price / 12)}/month billed annually"


PLANS: Dict[SubscriptionTier, Plan] = {
    SubscriptionTier.FREE: Plan(
        tier=SubscriptionTier.FREE,
        name="Free",
        description="Perfect for getting started",
        monthly_price=0,
        yearly_price=0,
        monthly_limit=settings.FREE_TIER_MONTHLY_LIMIT,
        features=(
            "Up to 5 job applications/posts per month",
            "Basic profile/project management",
            "Standard customer support",
            "Basic AI matching",
        ),
    ),
    SubscriptionTier.BASIC: Plan(
        tier=SubscriptionTier.BASIC,
        name="Pro",
        description="Most popular for professionals",
        monthly_price=29,
        yearly_price=290,
        monthly_limit=None,
        features=(
            "Unlimited job applications/posts",
            "Advanced AI-powered matching",
            "Priority customer support",
            "Detailed analytics & insights",
            "Payment protection insurance",
        ),
        popular=True,
    ),
    SubscriptionTier.BUSINESS: Plan(
        tier=SubscriptionTier.BUSINESS,
        name="Business",
        description="For agencies and growing teams",
        monthly_price=99,
        yearly_price=990,
        monthly_limit=None,
        features=(
            "Everything in Pro",
            "Team management dashboard",
            "Custom contract templates",
            "Bulk hiring tools",
            "Advanced reporting suite",
        ),
    ),
    SubscriptionTier.ENTERPRISE: Plan(
        tier=SubscriptionTier.ENTERPRISE,
        name="Enterprise",
        description="For large organisations",
        monthly_price=None,
        yearly_price=None,
        monthly_limit=None,
        features=(
            "Everything in Business",
            "White-label solutions",
            "Custom integrations & API access",
            "Dedicated account manager",
        ),
    ),
}


def get_plan(tier: SubscriptionTier) -> Plan:
    return PLANS[SubscriptionTier(tier)]


def add_months(moment: datetime, months: int) -> datetime:
    """Same day-of-month ``months`` later, clamped to the month's last day"""
    month_index = moment.month - 1 + months
    year = moment.year + month_index // 12
    month = month_index % 12 + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def billing_period(start: datetime, cycle: BillingCycle) -> Tuple[datetime, datetime]:
    return start, add_months(start, 12 if cycle == BillingCycle.YEARLY else 1)


def month_start(moment: Optional[datetime] = None) -> datetime:
    """First instant of the UTC calendar month containing moment. Naive values are read as UTC."""
    moment = moment or datetime.now(timezone.utc)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.replace(day=1, hour=0, minute=0, second=0, microsecond=0)


class SubscriptionService:
    @staticmethod
    def list_plans(cycle: BillingCycle = BillingCycle.MONTHLY) -> List[dict]:
        """Plan catalog rendered for the requested billing cycle"""
        return [
            {
                "tier": plan.tier,
                "name": plan.name,
                "description": plan.description,
                "price": plan.price(cycle),
                "price_label": plan.price_label(cycle),
                "monthly_equivalent_label": plan.monthly_equivalent_label(cycle),
                "savings_label": YEARLY_SAVINGS_LABEL if cycle == BillingCycle.YEARLY and plan.yearly_price else None,
                "monthly_limit": plan.monthly_limit,
                "features": list(plan.features),
                "popular": plan.popular,
            }
            for plan in PLANS.values()
        ]

    @staticmethod
    def get_subscription(db: Session, user_id: int) -> Optional[Subscription]:
        return db.query(Subscription).filter(Subscription.user_id == user_id).first()

    @staticmethod
    def subscribe(db: Session, profile: Profile, tier: SubscriptionTier, cycle: BillingCycle) -> Subscription:
        """Activate a paid tier immediately; no payment gateway is involved"""
        plan = get_plan(tier)
        if plan.price(cycle) == 0:
            raise ValidationFailed("You're already on the free plan")
        if plan.price(cycle) is None:
            raise ValidationFailed("Contact sales to subscribe to the Enterprise plan")

        start, end = billing_period(datetime.now(timezone.utc), cycle)
        subscription = SubscriptionService.get_subscription(db, profile.id)
        if subscription is None:
            subscription = Subscription(user_id=profile.id)
            db.add(subscription)

        subscription.tier = plan.tier
        subscription.billing_cycle = cycle
        subscription.status = SubscriptionStatus.ACTIVE
        subscription.current_period_start = start
        subscription.current_period_end = end
        subscription.cancel_at_period_end = False
        profile.subscription_tier = plan.tier

        db.commit()
        db.refresh(subscription)
        logger.info("User %s subscribed to %s (%s)", profile.id, plan.tier.value, cycle.value)
        return subscription

    @staticmethod
    def cancel(db: Session, profile: Profile) -> Optional[Subscription]:
        """Cancel the subscription and drop the profile back to the free tier"""
        subscription = SubscriptionService.get_subscription(db, profile.id)
        if subscription is None or subscription.status == SubscriptionStatus.CANCELED:
            return None

        subscription.status = SubscriptionStatus.CANCELED
        subscription.cancel_at_period_end = True
        profile.subscription_tier = SubscriptionTier.FREE

        db.commit()
        db.refresh(subscription)
        logger.info("User %s canceled %s subscription", profile.id, subscription.tier.value)
        return subscription

    @staticmethod
    def monthly_usage(db: Session, profile: Profile) -> int:
        """Projects posted (clients) or applications sent (freelancers) this month"""
        since = month_start()
        if profile.user_type == UserType.CLIENT:
            return db.query(Project).filter(
                Project.client_id == profile.id,
                Project.created_at >= since,
            ).count()
        return db.query(Application).filter(
            Application.freelancer_id == profile.id,
            Application.created_at >= since,
        ).count()

    @staticmethod
    def ensure_within_quota(db: Session, profile: Profile) -> None:
        limit = get_plan(profile.subscription_tier).monthly_limit
        if limit is None:
            return
        used = SubscriptionService.monthly_usage(db, profile)
        if used >= limit:
            logger.info("User %s hit the %s tier limit (%d/%d)", profile.id, profile.subscription_tier.value, used, limit)
            noun = "project posts" if profile.user_type == UserType.CLIENT else "applications"
            raise QuotaExceededError(
                f"Your plan allows {limit} {noun} per month. Upgrade to unlock unlimited {noun}."
            )
