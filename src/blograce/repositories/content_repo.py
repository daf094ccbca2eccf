"""Content repository backing the document store endpoints."""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from blograce.infrastructure.models import ContentModel


class ContentRepository:
    """Repository for ContentModel documents keyed by URL."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session."""
        self.session = session

    async def get_by_url(self, url: str) -> ContentModel | None:
        """Get the document stored for a URL."""
        stmt = select(ContentModel).where(ContentModel.url == url)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def save(self, url: str, content: str) -> ContentModel:
        """Insert or replace the document for a URL."""
        existing = await self.get_by_url(url)

        if existing:
            existing.content = content
            await self.session.flush()
            return existing

        model = ContentModel(url=url, content=content)
        self.session.add(model)
        await self.session.flush()
        return model

    async def delete_by_url(self, url: str) -> int:
        """Delete the document for a URL, returning the number removed."""
        stmt = delete(ContentModel).where(ContentModel.url == url)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0
