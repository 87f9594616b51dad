import logging
from datetime import date

from sqlalchemy import select

from console.db.base import Base
from console.db.session import engine, AsyncSessionLocal
from console.models.company import Company
from console.models.location import Location

import console.models  # noqa: F401

logger = logging.getLogger(__name__)

PRIMARY_COMPANY = dict(
    name="TechCorp",
    city="Toronto",
    country="Canada",
    province="Ontario",
    postal_code="M5V 3L9",
    street="290 Bremner Blvd",
    latitude=43.6426,
    longitude=-79.3871,
    total_employees=0,
    founded_date=date(2010, 1, 15),
    description="Head office",
)

DEMO_LOCATIONS = [
    dict(name="TechCorp Toronto", latitude=43.6426, longitude=-79.3871,
         country="Canada", city="Toronto", kind="office", active=True),
    dict(name="TechCorp Vancouver", latitude=49.2827, longitude=-123.1207,
         country="Canada", city="Vancouver", kind="distribution-center", active=True),
    dict(name="TechCorp Toronto Warehouse", latitude=43.7315, longitude=-79.7624,
         country="Canada", city="Toronto", kind="warehouse", active=True),
]


async def init_db(seed: bool = True) -> None:
    # Dev server: create tables automatically, no migrations.
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    if not seed:
        return

    async with AsyncSessionLocal() as db:
        res = await db.execute(select(Company.id).limit(1))
        if res.scalar_one_or_none() is None:
            db.add(Company(**PRIMARY_COMPANY))
            logger.info("Seeded primary company")

        res = await db.execute(select(Location.id).limit(1))
        if res.scalar_one_or_none() is None:
            db.add_all(Location(**row) for row in DEMO_LOCATIONS)
            logger.info("Seeded %d locations", len(DEMO_LOCATIONS))

        await db.commit()
