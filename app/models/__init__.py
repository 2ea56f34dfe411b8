from .user import User
from .profile import Profile, FreelancerProfile, ClientProfile, UserType, SubscriptionTier
from .catalog import Skill, ProjectCategory
from .project import Project, ProjectStatus
from .application import Application, ApplicationStatus
from .milestone import ProjectMilestone, MilestoneStatus
from .review import Review
from .time_tracking import TimeTracking
from .dispute import DisputeResolution, DisputeStatus
from .subscription import Subscription, SubscriptionStatus, BillingCycle
from .saved_project import SavedProject
from .preferences import UserPreferences
from .file_attachment import FileAttachment

__all__ = [
    "User",
    "Profile",
    "FreelancerProfile",
    "ClientProfile",
    "UserType",
    "SubscriptionTier",
    "Skill",
    "ProjectCategory",
    "Project",
    "ProjectStatus",
    "Application",
    "ApplicationStatus",
    "ProjectMilestone",
    "MilestoneStatus",
    "Review",
    "TimeTracking",
    "DisputeResolution",
    "DisputeStatus",
    "Subscription",
    "SubscriptionStatus",
    "BillingCycle",
    "SavedProject",
    "UserPreferences",
    "FileAttachment",
]
