"""PostgreSQL daily selection repository."""

from __future__ import annotations

from datetime import date

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from showvote.domain.errors import DailySelectionAlreadyExistsError
from showvote.domain.models.daily_selection import DailySelection


class PostgresDailySelectionRepository:
    """DailySelectionRepositoryProtocol backed by daily_selections.

    The slate header and its ordered show rows are written in one
    transaction, so a slate is either complete or absent.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def get_for_day(self, day: date) -> DailySelection | None:
        async with self._session_factory() as session:
            result = await session.execute(
                text("""
                    SELECT s.id, s.selection_date, ds.show_id
                    FROM daily_selections s
                    LEFT JOIN daily_selection_shows ds ON ds.selection_id = s.id
                    WHERE s.selection_date = :day
                    ORDER BY ds.position
                """),
                {"day": day},
            )
            rows = result.fetchall()

        if not rows:
            return None
        return DailySelection(
            id=rows[0].id,
            day=rows[0].selection_date,
            show_ids=tuple(row.show_id for row in rows if row.show_id is not None),
        )

    async def create(self, selection: DailySelection) -> None:
        async with self._session_factory() as session, session.begin():
            result = await session.execute(
                text("""
                    INSERT INTO daily_selections (id, selection_date)
                    VALUES (:id, :day)
                    ON CONFLICT (selection_date) DO NOTHING
                    RETURNING id
                """),
                {"id": selection.id, "day": selection.day},
            )
            if result.scalar() is None:
                raise DailySelectionAlreadyExistsError(selection.day)

            if selection.show_ids:
                await session.execute(
                    text("""
                        INSERT INTO daily_selection_shows (selection_id, position, show_id)
                        VALUES (:selection_id, :position, :show_id)
                    """),
                    [
                        {
                            "selection_id": selection.id,
                            "position": position,
                            "show_id": show_id,
                        }
                        for position, show_id in enumerate(selection.show_ids)
                    ],
                )
