import os

# Point settings at an in-memory database before the app is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("STORAGE_TYPE", "local")

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app import models  # noqa: F401  registers every table on Base.metadata
from app.core.database import Base, get_db
from app.core.security import create_access_token
from app.models.profile import UserType
from app.schemas.application import ApplicationCreate
from app.schemas.auth import SignUpRequest
from app.schemas.project import ProjectCreate
from app.services.application import ApplicationService
from app.services.project import ProjectService
from app.services.user import UserService
from main import app

SQLALCHEMY_DATABASE_URL = "sqlite://"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@event.listens_for(engine, "connect")
def enable_foreign_keys(dbapi_connection, connection_record):
    # SQLite enforces foreign keys per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


PASSWORD = "secret123"


def override_get_db():
    try:
        db = TestingSessionLocal()
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


def create_account(db, email, full_name, user_type):
    return UserService.sign_up(db, SignUpRequest(
        email=email,
        password=PASSWORD,
        confirm_password=PASSWORD,
        full_name=full_name,
        user_type=user_type,
    ))


def auth_headers(user):
    return {"Authorization": f"Bearer {create_access_token(subject=str(user.id))}"}


@pytest.fixture(scope="function")
def db():
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client_user(db):
    return create_account(db, "client@example.com", "Casey Client", UserType.CLIENT)


@pytest.fixture
def freelancer_user(db):
    return create_account(db, "freelancer@example.com", "Frankie Freelancer", UserType.FREELANCER)


@pytest.fixture
def other_freelancer(db):
    return create_account(db, "other@example.com", "Olive Other", UserType.FREELANCER)


@pytest.fixture
def client_headers(client_user):
    return auth_headers(client_user)


@pytest.fixture
def freelancer_headers(freelancer_user):
    return auth_headers(freelancer_user)


@pytest.fixture
def other_headers(other_freelancer):
    return auth_headers(other_freelancer)


@pytest.fixture
def open_project(db, client_user):
    return ProjectService.create_project(db, ProjectCreate(
        title="Build a booking API",
        description="REST API for a small booking site",
        budget_min=500,
        budget_max=1500,
        required_skills=["python", "fastapi"],
    ), client_user.profile)


@pytest.fixture
def hired_project(db, open_project, freelancer_user):
    """Open project with the freelancer's application accepted"""
    application = ApplicationService.create_application(
        db, ApplicationCreate(project_id=open_project.id, cover_letter="I can do this"), freelancer_user.profile
    )
    ApplicationService.accept_application(db, application.id)
    db.refresh(open_project)
    return open_project
