from __future__ import annotations

import json
from typing import Any

from sqlalchemy import CursorResult, String, Text, delete, select
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from commerce_admin.repositories.base import AbstractRecordStore


class Base(DeclarativeBase):
    pass


class RecordORM(Base):
    __tablename__ = "records"

    key: Mapped[str] = mapped_column(String, primary_key=True)
    # The whole value as JSON text; the store never looks inside it.
    data: Mapped[str] = mapped_column(Text, nullable=False)


class SQLiteRecordStore(AbstractRecordStore):
    def __init__(self, database_url: str) -> None:
        self.engine = create_async_engine(database_url)
        self.async_session_maker = async_sessionmaker(self.engine, expire_on_commit=False)

    async def initialize(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def close(self) -> None:
        await self.engine.dispose()

    async def get(self, key: str) -> Any | None:
        async with self.async_session_maker() as session:
            result = await session.execute(select(RecordORM).where(RecordORM.key == key))
            orm_record = result.scalar_one_or_none()
            if orm_record:
                return json.loads(orm_record.data)
            return None

    async def put(self, key: str, value: Any) -> None:
        async with self.async_session_maker() as session, session.begin():
            result = await session.execute(select(RecordORM).where(RecordORM.key == key))
            orm_record = result.scalar_one_or_none()
            if orm_record:
                orm_record.data = json.dumps(value)
            else:
                session.add(RecordORM(key=key, data=json.dumps(value)))

    async def delete(self, key: str) -> bool:
        async with self.async_session_maker() as session, session.begin():
            result = await session.execute(delete(RecordORM).where(RecordORM.key == key))
            if isinstance(result, CursorResult):
                return bool(result.rowcount > 0)
            return False
