from fastapi import FastAPI

from console.core.config import settings
from console.core.logger_setup import setup_logging
from console.db.init_db import init_db
from console.api.router import router


app = FastAPI(title="Admin Console API")
app.include_router(router)


@app.on_event("startup")
async def startup():
    setup_logging(settings)
    await init_db(seed=settings.SEED_DEMO_DATA)


@app.get("/health")
async def health():
    return {"status": "ok"}
