from .user import User
from .auth import Token, TokenPayload, SignUpRequest, SignInRequest, RefreshTokenRequest, SessionInfo
from .profile import (
    Profile, ProfileUpdate, ProfileSummary,
    FreelancerProfile, FreelancerProfileUpdate, ClientProfile, ClientProfileUpdate
)
from .project import Project, ProjectCreate, ProjectUpdate, ProjectStatusUpdate, MatchedProject
from .application import Application, ApplicationCreate, ApplicationUpdate
from .milestone import Milestone, MilestoneCreate, MilestoneStatusUpdate, MilestoneSummary
from .review import Review, ReviewCreate, ReviewWithDetails, ReviewSummary, RatingBucket
from .time_tracking import TimeTracking, TimeTrackingStart, TimeTrackingWithDetails, ActiveTimer, TimeSummary
from .dispute import Dispute, DisputeCreate, DisputeStatusUpdate, DisputeWithDetails
from .subscription import Plan, Subscription, SubscriptionCreate, Usage
from .saved_project import SavedProject, SavedProjectCreate
from .preferences import Preferences, PreferencesUpdate
from .catalog import Skill, ProjectCategory
from .file_attachment import FileAttachment, FileAttachmentWithDetails

__all__ = [
    # User and auth schemas
    "User", "Token", "TokenPayload", "SignUpRequest", "SignInRequest", "RefreshTokenRequest", "SessionInfo",
    # Profile schemas
    "Profile", "ProfileUpdate", "ProfileSummary",
    "FreelancerProfile", "FreelancerProfileUpdate", "ClientProfile", "ClientProfileUpdate",
    # Project and application schemas
    "Project", "ProjectCreate", "ProjectUpdate", "ProjectStatusUpdate", "MatchedProject",
    "Application", "ApplicationCreate", "ApplicationUpdate",
    # Engagement schemas
    "Milestone", "MilestoneCreate", "MilestoneStatusUpdate", "MilestoneSummary",
    "Review", "ReviewCreate", "ReviewWithDetails", "ReviewSummary", "RatingBucket",
    "TimeTracking", "TimeTrackingStart", "TimeTrackingWithDetails", "ActiveTimer", "TimeSummary",
    "Dispute", "DisputeCreate", "DisputeStatusUpdate", "DisputeWithDetails",
    # Billing schemas
    "Plan", "Subscription", "SubscriptionCreate", "Usage",
    # Misc schemas
    "SavedProject", "SavedProjectCreate", "Preferences", "PreferencesUpdate",
    "Skill", "ProjectCategory", "FileAttachment", "FileAttachmentWithDetails",
]
