"""SQL User Repository — UserRepository implementation over an AsyncSession.

Invariants:
    - ORM rows never escape: every read returns core.user.User or None
    - create/delete commit immediately (one write per call, no unit of work
      spanning handler steps)
    - IntegrityError -> DatabaseError(category=CONFLICT); any other
      SQLAlchemyError -> DatabaseError; session rolled back before raising
    - delete raises RecordNotFoundError when the row does not exist
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from user_service.core.domain_types import UserId, UserRole, UserStatus
from user_service.core.errors import (
    DatabaseError, ErrorCategory, RecordNotFoundError,
)
from user_service.core.user import User
from user_service.models.user import UserModel

logger = logging.getLogger(__name__)


def to_domain(row: UserModel) -> User:
    return User(
        id=UserId(row.id),
        username=row.username,
        email=row.email,
        phone=row.phone,
        password_hash=row.password_hash,
        role=UserRole(row.role),
        status=UserStatus(row.status),
        created_at=row.created_at,
    )


def to_row(user: User) -> UserModel:
    return UserModel(
        id=user.id,
        username=user.username,
        email=user.email,
        phone=user.phone,
        password_hash=user.password_hash,
        role=user.role.value,
        status=user.status.value,
        created_at=user.created_at,
    )


class SqlUserRepository:
    """User persistence backed by SQLAlchemy async ORM."""

    def __init__(self, db: AsyncSession):
        self._db = db

    @asynccontextmanager
    async def _translate_errors(self, operation: str) -> AsyncIterator[None]:
        try:
            yield
        except IntegrityError as e:
            await self._db.rollback()
            logger.error(f"DB integrity error during {operation}: {e}")
            raise DatabaseError(
                "Integrity constraint violated", operation, ErrorCategory.CONFLICT,
            )
        except SQLAlchemyError as e:
            await self._db.rollback()
            logger.error(f"DB error during {operation}: {e}")
            raise DatabaseError("Database operation failed", operation)

    async def create(self, user: User) -> None:
        async with self._translate_errors("insert"):
            self._db.add(to_row(user))
            await self._db.commit()

    async def get_by_id(self, user_id: UserId) -> User | None:
        async with self._translate_errors("select"):
            row = await self._db.get(UserModel, user_id)
        return to_domain(row) if row else None

    async def get_by_email(self, email: str) -> User | None:
        async with self._translate_errors("select"):
            result = await self._db.execute(
                select(UserModel).where(UserModel.email == email),
            )
            row = result.scalar_one_or_none()
        return to_domain(row) if row else None

    async def delete(self, user_id: UserId) -> None:
        async with self._translate_errors("delete"):
            row = await self._db.get(UserModel, user_id)
            if row is None:
                raise RecordNotFoundError("User", str(user_id))
            await self._db.delete(row)
            await self._db.commit()

    async def list_page(self, offset: int, limit: int) -> tuple[list[User], int]:
        async with self._translate_errors("select"):
            total = await self._db.scalar(
                select(func.count()).select_from(UserModel),
            )
            result = await self._db.execute(
                select(UserModel)
                .order_by(UserModel.created_at.desc(), UserModel.id)
                .limit(limit)
                .offset(offset),
            )
            rows = result.scalars().all()
        return [to_domain(r) for r in rows], int(total or 0)
