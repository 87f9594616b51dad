from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from console.core.config import settings

_url = settings.DATABASE_URL
_engine_kwargs = {}
if _url.startswith("sqlite"):
    # connections must not outlive the event loop that opened them
    _engine_kwargs["poolclass"] = NullPool

engine = create_async_engine(_url, **_engine_kwargs)

AsyncSessionLocal = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def get_db():
    async with AsyncSessionLocal() as db:
        yield db
