"""Create login accounts for drivers that do not have one.

Each account uses the driver number as username and the driver number
followed by the first name as first password.

    python create_driver_users.py
"""
import asyncio

from taxiadmin.db.database import build_engine, build_session_maker
from taxiadmin.services.accounts import (
    build_driver_user,
    drivers_without_user,
    initial_driver_password,
)


async def create_driver_users():
    engine = build_engine()
    async with build_session_maker(engine)() as session:
        drivers = await drivers_without_user(session)
        print(f"[i] Found {len(drivers)} drivers without user accounts")

        for driver in drivers:
            session.add(build_driver_user(driver))
            print(
                f"[OK] {driver.full_name}: "
                f"{driver.driver_number} / {initial_driver_password(driver)}"
            )

        await session.commit()

    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(create_driver_users())
