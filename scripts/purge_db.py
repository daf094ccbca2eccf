import asyncio

from sqlalchemy import text

from blograce.infrastructure.database import async_session_factory


async def clear_data():
    async with async_session_factory() as session:
        # The two stores are independent, clear both
        await session.execute(text("DELETE FROM summaries"))
        await session.execute(text("DELETE FROM contents"))
        await session.commit()
        print("Database cleared! Summaries and mirrored contents removed.")


asyncio.run(clear_data())
