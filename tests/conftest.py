"""
pytest Fixtures for Review Service Tests

FIXTURE SCOPES USED HERE:
- function: every test gets a brand-new in-memory database, so committed
  rows, rolled-back constraint violations and cascades never leak between
  tests
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app.
# Settings are cached on first import.
import os

os.environ["SECRET_KEY"] = "test-secret-key-for-unit-tests-at-least-32-characters-long"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"  # Minimum work factor keeps hashing fast
os.environ["RESET_SCHEMA_ON_STARTUP"] = "false"

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from review_api.database import create_tables, drop_tables, get_db
from review_api.main import app
from review_api.models import Item, Review, User
from review_api.services.credentials import register_user
from review_api.services.items import create_item
from review_api.services.reviews import create_review
from review_api.services.security import TokenService, get_token_service

# =============================================================================
# DATABASE FIXTURES
# =============================================================================
# SQLite in-memory database. StaticPool keeps the single connection alive;
# without it the in-memory database would disappear between connections.
# Foreign keys are switched on by review_api.database for every SQLite
# connection.


@pytest.fixture
def engine():
    """Create a fresh SQLite in-memory database with all tables."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(engine)

    yield engine

    drop_tables(engine)
    engine.dispose()


@pytest.fixture
def db_session(engine) -> Generator[Session, None, None]:
    """Create a database session for one test."""
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )
    session = TestSessionLocal()

    yield session

    session.close()


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Create a test client with the test database.

    We override the get_db dependency to use our test session.
    """

    def override_get_db():
        """Provide test database session instead of real one."""
        try:
            yield db_session
        finally:
            pass  # Session cleanup handled by db_session fixture

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def token_service() -> TokenService:
    """The application's token service (signed with the test secret)."""
    return get_token_service()


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================


@pytest.fixture
def moe(db_session: Session) -> User:
    """Registered user moe / m_pw."""
    return register_user(db_session, "moe", "m_pw")


@pytest.fixture
def lucy(db_session: Session) -> User:
    """Second registered user, for ownership scenarios."""
    return register_user(db_session, "lucy", "l_pw")


@pytest.fixture
def foo(db_session: Session) -> Item:
    return create_item(db_session, "foo", "foo description")


@pytest.fixture
def bar(db_session: Session) -> Item:
    return create_item(db_session, "bar", "bar description")


@pytest.fixture
def moe_review(db_session: Session, moe: User, foo: Item) -> Review:
    """moe's review of foo."""
    return create_review(db_session, text="ok", rating=4, user_id=moe.id, item_id=foo.id)


@pytest.fixture
def auth_header(token_service: TokenService):
    """Build an Authorization header for a user."""

    def _auth_header(user: User) -> dict:
        return {"Authorization": f"Bearer {token_service.issue(user.id)}"}

    return _auth_header
