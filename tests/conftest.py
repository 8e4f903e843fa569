"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
import logfire
import pytest
from fastapi.testclient import TestClient

from gallery.config import AuthSettings, Settings
from gallery.domain.model import Design
from gallery.domain.value import DesignId, Principal, UserId

# Keep telemetry local during tests
logfire.configure(send_to_logfire=False, console=False)

ADMIN_EMAIL = "admin@gallery.test"


def make_principal(
    display_name: str = "Test User",
    email: str | None = None,
    user_id: str | None = None,
) -> Principal:
    """Build a principal, with a fresh user ID unless one is given."""
    return Principal(
        id=UserId(user_id or str(uuid4())),
        display_name=display_name,
        avatar_url=None,
        email=email,
    )


def make_design(
    title: str = "Helmet-1",
    score: int = 0,
    created_at: datetime | None = None,
    owner: Principal | None = None,
) -> Design:
    """Build a design without going through the service."""
    owner = owner or make_principal("Owner")
    return Design(
        id=DesignId(uuid4()),
        title=title,
        image_url=f"https://i.example.com/{uuid4().hex[:8]}.png",
        score=score,
        owner_id=owner.id,
        owner_display_name=owner.display_name,
        created_at=created_at or datetime.now(),
    )


def make_token(principal: Principal, settings: AuthSettings) -> str:
    """Mint a session token the way the identity provider does."""
    payload = {
        "user_id": principal.id,
        "display_name": principal.display_name,
        "avatar_url": principal.avatar_url,
        "email": principal.email,
        "exp": datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def sign_in(client: TestClient, principal: Principal, settings: Settings) -> None:
    """Set the session cookie for principal on the test client."""
    token = make_token(principal, settings.auth)
    client.cookies.set(settings.auth.cookie_name, token)


@pytest.fixture
def admin() -> Principal:
    """Principal on the moderation allow-list (by email)."""
    return make_principal("Admin", email=ADMIN_EMAIL)


@pytest.fixture
def staggered_designs() -> list[Design]:
    """Designs one minute apart, oldest first."""
    start = datetime(2026, 1, 1, 12, 0, 0)
    return [
        make_design(f"Design {i}", created_at=start + timedelta(minutes=i))
        for i in range(5)
    ]
