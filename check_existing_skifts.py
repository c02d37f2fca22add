"""Check every registered shift against the varsel thresholds.

Creates missing varsler and refreshes existing ones:
    python check_existing_skifts.py
"""
import asyncio
import logging

from taxiadmin.db.database import build_engine, build_session_maker
from taxiadmin.services.varsler import check_all_skifts


async def check_existing_skifts():
    engine = build_engine()
    async with build_session_maker(engine)() as session:
        summary = await check_all_skifts(session)
        await session.commit()

    await engine.dispose()

    print("\nSummary:")
    print(f"Total:   {summary.total}")
    print(f"Created: {summary.created}")
    print(f"Updated: {summary.updated}")
    print(f"Skipped: {summary.skipped}")
    if summary.failed:
        print(f"Failed:  {summary.failed}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(check_existing_skifts())
