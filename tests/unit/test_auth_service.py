import pytest

from commerce_admin.core.security import PasswordChecker
from commerce_admin.domain.errors import EntityNotFoundError
from commerce_admin.domain.models import User
from commerce_admin.domain.registry import USERS
from commerce_admin.repositories.entity_store import EntityStore
from commerce_admin.repositories.memory_record_store import InMemoryRecordStore
from commerce_admin.services.auth_service import AuthService
from commerce_admin.services.resource_service import ResourceService


@pytest.fixture  # type: ignore[misc]
def users(record_store: InMemoryRecordStore) -> ResourceService[User]:
    return ResourceService(EntityStore(record_store, USERS), actor_id="user-1")


@pytest.fixture  # type: ignore[misc]
def auth_service(users: ResourceService[User]) -> AuthService:
    return AuthService(users=users, checker=PasswordChecker("password"), actor_id="user-1")


def test_password_checker() -> None:
    checker = PasswordChecker("password")
    assert checker.verify("password") is True
    assert checker.verify("Password") is False
    assert checker.verify("") is False


@pytest.mark.asyncio  # type: ignore[misc]
async def test_login_returns_admin_user(
    auth_service: AuthService, record_store: InMemoryRecordStore
) -> None:
    await EntityStore(record_store, USERS).ensure_seed()

    user = await auth_service.login("password")

    assert user is not None
    assert user.id == "user-1"
    assert user.email == "admin@nexus.com"


@pytest.mark.asyncio  # type: ignore[misc]
async def test_login_wrong_password(
    auth_service: AuthService, record_store: InMemoryRecordStore
) -> None:
    await EntityStore(record_store, USERS).ensure_seed()

    assert await auth_service.login("wrong") is None


@pytest.mark.asyncio  # type: ignore[misc]
async def test_login_without_admin_record(auth_service: AuthService) -> None:
    with pytest.raises(EntityNotFoundError):
        await auth_service.login("password")
