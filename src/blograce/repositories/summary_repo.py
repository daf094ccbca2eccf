"""Summary repository for record store operations."""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from blograce.infrastructure.models import SummaryModel


class SummaryRepository:
    """Repository for SummaryModel insert, list and delete.

    Rows are never updated once written.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session."""
        self.session = session

    async def create(self, url: str, summary: str) -> SummaryModel:
        """Insert a new summary row."""
        model = SummaryModel(url=url, summary=summary)
        self.session.add(model)
        await self.session.flush()
        return model

    async def list_all(self) -> list[SummaryModel]:
        """List every summary, newest (highest id) first."""
        stmt = select(SummaryModel).order_by(SummaryModel.id.desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def delete_by_id(self, summary_id: int) -> int:
        """Delete a summary by id.

        Returns:
            Number of rows removed (0 when the id is unknown)
        """
        stmt = delete(SummaryModel).where(SummaryModel.id == summary_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0
