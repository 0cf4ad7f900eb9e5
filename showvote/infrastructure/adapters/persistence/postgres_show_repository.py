"""PostgreSQL show repository."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any
from uuid import UUID

from sqlalchemy import bindparam, text
from sqlalchemy.dialects.postgresql import ARRAY, UUID as PG_UUID
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from showvote.domain.models.show import Show

_SELECT_COLUMNS = "id, title, description, image_url, genre"


def _row_to_show(row: Any) -> Show:
    return Show(
        id=row.id,
        title=row.title,
        description=row.description,
        image_url=row.image_url,
        genre=row.genre,
    )


class PostgresShowRepository:
    """ShowRepositoryProtocol backed by the shows table."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def add(self, show: Show) -> None:
        try:
            async with self._session_factory() as session, session.begin():
                await session.execute(
                    text("""
                        INSERT INTO shows (id, title, description, image_url, genre)
                        VALUES (:id, :title, :description, :image_url, :genre)
                    """),
                    {
                        "id": show.id,
                        "title": show.title,
                        "description": show.description,
                        "image_url": show.image_url,
                        "genre": show.genre,
                    },
                )
        except IntegrityError as exc:
            raise ValueError(f"Show already exists: {show.id}") from exc

    async def get(self, show_id: UUID) -> Show | None:
        async with self._session_factory() as session:
            result = await session.execute(
                text(f"SELECT {_SELECT_COLUMNS} FROM shows WHERE id = :id"),
                {"id": show_id},
            )
            row = result.fetchone()
        return _row_to_show(row) if row else None

    async def get_many(self, show_ids: Iterable[UUID]) -> dict[UUID, Show]:
        ids = list(dict.fromkeys(show_ids))
        if not ids:
            return {}
        statement = text(
            f"SELECT {_SELECT_COLUMNS} FROM shows WHERE id = ANY(:ids)"
        ).bindparams(bindparam("ids", type_=ARRAY(PG_UUID(as_uuid=True))))
        async with self._session_factory() as session:
            result = await session.execute(statement, {"ids": ids})
            rows = result.fetchall()
        return {row.id: _row_to_show(row) for row in rows}

    async def list_all(self) -> list[Show]:
        async with self._session_factory() as session:
            result = await session.execute(
                text(f"SELECT {_SELECT_COLUMNS} FROM shows ORDER BY created_at, id")
            )
            rows = result.fetchall()
        return [_row_to_show(row) for row in rows]
