"""Aggregate figures shown alongside milestones, reviews and timers."""

from typing import Dict, Iterable, List, Optional, Sequence

from app.models.milestone import MilestoneStatus

RATING_SCALE = (5, 4, 3, 2, 1)


def _is_completed(milestone) -> bool:
    return milestone.status == MilestoneStatus.COMPLETED


def _amount_of(milestone) -> float:
    return milestone.amount or 0


def milestone_progress(milestones: Sequence) -> float:
    """Percentage of milestones completed, 0 for an empty list"""
    if not milestones:
        return 0.0
    completed = sum(1 for m in milestones if _is_completed(m))
    return completed / len(milestones) * 100


def milestone_total_amount(milestones: Iterable) -> float:
    return sum(_amount_of(m) for m in milestones)


def milestone_completed_amount(milestones: Iterable) -> float:
    return sum(_amount_of(m) for m in milestones if _is_completed(m))


def milestone_summary(milestones: Sequence) -> dict:
    completed = [m for m in milestones if _is_completed(m)]
    return {
        "total_milestones": len(milestones),
        "completed_milestones": len(completed),
        "progress_percentage": round(milestone_progress(milestones), 2),
        "total_amount": round(milestone_total_amount(milestones), 2),
        "completed_amount": round(milestone_completed_amount(milestones), 2),
    }


def average_rating(ratings: Sequence[int]) -> float:
    """Arithmetic mean of ratings, 0 when there are none"""
    if not ratings:
        return 0.0
    return sum(ratings) / len(ratings)


def rating_distribution(ratings: Sequence[int]) -> List[Dict]:
    """Count and share of each star value, from 5 down to 1"""
    total = len(ratings)
    distribution = []
    for stars in RATING_SCALE:
        count = sum(1 for r in ratings if r == stars)
        percentage = count / total * 100 if total else 0.0
        distribution.append({"rating": stars, "count": count, "percentage": round(percentage, 1)})
    return distribution


def format_elapsed(seconds: int) -> str:
    """Render a running timer as HH:MM:SS"""
    seconds = max(int(seconds), 0)
    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    secs = seconds % 60
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def format_duration(minutes: int) -> str:
    hours = minutes // 60
    mins = minutes % 60
    return f"{hours}h {mins}m" if hours > 0 else f"{mins}m"


def calculate_earnings(minutes: float, hourly_rate: Optional[float]) -> float:
    """Earnings for a tracked duration, rounded to cents"""
    if not minutes or not hourly_rate:
        return 0.0
    return round((minutes / 60) * hourly_rate, 2)


def format_currency(amount: float) -> str:
    return f"${amount:,.2f}"
