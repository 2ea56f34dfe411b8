"""Status transition rules for every entity that carries a status enum."""

import logging
from typing import Dict, FrozenSet, Type
import enum

from app.core.errors import InvalidStatusTransition
from app.models.application import ApplicationStatus
from app.models.dispute import DisputeStatus
from app.models.milestone import MilestoneStatus
from app.models.project import ProjectStatus

logger = logging.getLogger(__name__)

PROJECT_TRANSITIONS: Dict[ProjectStatus, FrozenSet[ProjectStatus]] = {
    ProjectStatus.OPEN: frozenset({ProjectStatus.IN_PROGRESS, ProjectStatus.CANCELLED}),
    ProjectStatus.IN_PROGRESS: frozenset({ProjectStatus.COMPLETED, ProjectStatus.CANCELLED}),
    ProjectStatus.COMPLETED: frozenset(),
    ProjectStatus.CANCELLED: frozenset(),
}

APPLICATION_TRANSITIONS: Dict[ApplicationStatus, FrozenSet[ApplicationStatus]] = {
    ApplicationStatus.PENDING: frozenset({ApplicationStatus.ACCEPTED, ApplicationStatus.REJECTED}),
    ApplicationStatus.ACCEPTED: frozenset(),
    ApplicationStatus.REJECTED: frozenset(),
}

MILESTONE_TRANSITIONS: Dict[MilestoneStatus, FrozenSet[MilestoneStatus]] = {
    MilestoneStatus.PENDING: frozenset({MilestoneStatus.IN_PROGRESS, MilestoneStatus.DISPUTED}),
    MilestoneStatus.IN_PROGRESS: frozenset({MilestoneStatus.COMPLETED, MilestoneStatus.DISPUTED}),
    MilestoneStatus.COMPLETED: frozenset(),
    MilestoneStatus.DISPUTED: frozenset(),
}

DISPUTE_TRANSITIONS: Dict[DisputeStatus, FrozenSet[DisputeStatus]] = {
    DisputeStatus.OPEN: frozenset({DisputeStatus.IN_REVIEW, DisputeStatus.CLOSED}),
    DisputeStatus.IN_REVIEW: frozenset({DisputeStatus.RESOLVED, DisputeStatus.CLOSED}),
    DisputeStatus.RESOLVED: frozenset(),
    DisputeStatus.CLOSED: frozenset(),
}

_TABLES: Dict[Type[enum.Enum], tuple] = {
    ProjectStatus: ("project", PROJECT_TRANSITIONS),
    ApplicationStatus: ("application", APPLICATION_TRANSITIONS),
    MilestoneStatus: ("milestone", MILESTONE_TRANSITIONS),
    DisputeStatus: ("dispute", DISPUTE_TRANSITIONS),
}


def can_transition(current: enum.Enum, target: enum.Enum) -> bool:
    """Whether ``current -> target`` is allowed; same-state writes are not"""
    _, table = _TABLES[type(current)]
    return target in table[current]


def ensure_transition(current: enum.Enum, target: enum.Enum) -> None:
    """Raise InvalidStatusTransition unless ``current -> target`` is allowed"""
    if type(current) is not type(target):
        raise TypeError(f"Mismatched status types: {type(current).__name__} / {type(target).__name__}")
    if not can_transition(current, target):
        entity, _ = _TABLES[type(current)]
        logger.info("Rejected %s transition %s -> %s", entity, current.value, target.value)
        raise InvalidStatusTransition(entity, current.value, target.value)


def is_terminal(status: enum.Enum) -> bool:
    _, table = _TABLES[type(status)]
    return not table[status]
