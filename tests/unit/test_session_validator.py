"""Unit tests for DatabaseSessionValidator and session use cases."""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest

from eoriauthz.application.use_cases.session.create_session import CreateSessionUseCase
from eoriauthz.application.use_cases.session.purge_expired_sessions import (
    PurgeExpiredSessionsUseCase,
)
from eoriauthz.application.use_cases.session.revoke_session import (
    RevokeSessionUseCase,
    RevokeUserSessionsUseCase,
)
from eoriauthz.domain.entities import Session
from eoriauthz.domain.exceptions import NotFound, PermissionDenied
from eoriauthz.domain.value_objects import SessionStatus
from eoriauthz.infrastructure.auth.session_validator import DatabaseSessionValidator

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)


def _session(user_id, token="tok", expires_at=NOW + timedelta(hours=1)) -> Session:
    return Session(token=token, user_id=user_id, expires_at=expires_at, created_at=NOW)


@pytest.mark.asyncio
async def test_valid_session(uow_factory, fake_uow) -> None:
    user = fake_uow.users.add_user()
    await fake_uow.sessions.create(_session(user.id))

    result = await DatabaseSessionValidator(uow_factory).validate("tok", now=NOW)

    assert result.is_valid
    assert result.status == SessionStatus.VALID
    assert result.user_id == user.id


@pytest.mark.asyncio
async def test_expired_session_is_left_in_place(uow_factory, fake_uow) -> None:
    user = fake_uow.users.add_user()
    await fake_uow.sessions.create(_session(user.id, expires_at=NOW - timedelta(seconds=1)))

    result = await DatabaseSessionValidator(uow_factory).validate("tok", now=NOW)

    assert result.status == SessionStatus.EXPIRED
    assert result.user_id is None
    assert await fake_uow.sessions.get("tok") is not None


@pytest.mark.asyncio
async def test_expiry_boundary_is_still_valid(uow_factory, fake_uow) -> None:
    user = fake_uow.users.add_user()
    await fake_uow.sessions.create(_session(user.id, expires_at=NOW))

    result = await DatabaseSessionValidator(uow_factory).validate("tok", now=NOW)

    assert result.is_valid


@pytest.mark.asyncio
@pytest.mark.parametrize("token", [None, "", "missing"])
async def test_unknown_token(uow_factory, token) -> None:
    result = await DatabaseSessionValidator(uow_factory).validate(token, now=NOW)

    assert result.status == SessionStatus.NOT_FOUND


@pytest.mark.asyncio
async def test_create_session_issues_unique_tokens(uow_factory, fake_uow) -> None:
    user = fake_uow.users.add_user()
    use_case = CreateSessionUseCase(uow_factory, ttl=timedelta(hours=2))

    first = await use_case.execute(user.id, ip_address="10.0.0.1")
    second = await use_case.execute(user.id)

    assert first.token != second.token
    assert len(first.token) >= 40
    assert first.expires_at - first.created_at == timedelta(hours=2)
    validation = await DatabaseSessionValidator(uow_factory).validate(first.token)
    assert validation.user_id == user.id


@pytest.mark.asyncio
async def test_create_session_unknown_user(uow_factory) -> None:
    with pytest.raises(NotFound):
        await CreateSessionUseCase(uow_factory).execute(uuid4())


@pytest.mark.asyncio
async def test_revoke_session(uow_factory, fake_uow) -> None:
    user = fake_uow.users.add_user()
    await fake_uow.sessions.create(_session(user.id))

    await RevokeSessionUseCase(uow_factory).execute("tok")

    result = await DatabaseSessionValidator(uow_factory).validate("tok", now=NOW)
    assert result.status == SessionStatus.NOT_FOUND


@pytest.mark.asyncio
async def test_user_may_revoke_own_sessions(uow_factory, fake_uow, access, plain_user) -> None:
    await fake_uow.sessions.create(_session(plain_user.id, token="a"))
    await fake_uow.sessions.create(_session(plain_user.id, token="b"))

    count = await RevokeUserSessionsUseCase(uow_factory, access).execute(
        plain_user.id, plain_user.id
    )

    assert count == 2


@pytest.mark.asyncio
async def test_revoking_others_requires_sessions_manage(
    uow_factory, fake_uow, access, plain_user, admin_user
) -> None:
    await fake_uow.sessions.create(_session(admin_user.id))
    use_case = RevokeUserSessionsUseCase(uow_factory, access)

    with pytest.raises(PermissionDenied):
        await use_case.execute(plain_user.id, admin_user.id)
    assert await use_case.execute(admin_user.id, admin_user.id) == 1


@pytest.mark.asyncio
async def test_purge_expired_sessions(uow_factory, fake_uow) -> None:
    user = fake_uow.users.add_user()
    await fake_uow.sessions.create(_session(user.id, token="old", expires_at=NOW - timedelta(days=1)))
    await fake_uow.sessions.create(_session(user.id, token="new"))

    count = await PurgeExpiredSessionsUseCase(uow_factory).execute(now=NOW)

    assert count == 1
    assert await fake_uow.sessions.get("new") is not None
