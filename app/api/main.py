from fastapi import APIRouter

from app.api.v1 import (
    applications, auth, catalog, disputes, files, milestones, preferences,
    profiles, projects, reviews, saved_projects, subscriptions, time_tracking,
)

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["authentication"])
api_router.include_router(profiles.router, prefix="/profiles", tags=["profiles"])
api_router.include_router(projects.router, prefix="/projects", tags=["projects"])
api_router.include_router(applications.router, prefix="/applications", tags=["applications"])
api_router.include_router(milestones.router, prefix="/milestones", tags=["milestones"])
api_router.include_router(reviews.router, prefix="/reviews", tags=["reviews"])
api_router.include_router(time_tracking.router, prefix="/time-tracking", tags=["time tracking"])
api_router.include_router(disputes.router, prefix="/disputes", tags=["disputes"])
api_router.include_router(files.router, prefix="/files", tags=["files"])
api_router.include_router(saved_projects.router, prefix="/saved-projects", tags=["saved projects"])
api_router.include_router(preferences.router, prefix="/preferences", tags=["preferences"])
api_router.include_router(catalog.router, prefix="/catalog", tags=["catalog"])
api_router.include_router(subscriptions.router, prefix="/subscriptions", tags=["subscriptions"])
