from contextlib import asynccontextmanager

from fastapi import FastAPI

from .api import router
from .database import init_db


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    yield


app = FastAPI(title="Onboard Scheduler", lifespan=lifespan)
app.include_router(router)


@app.get("/health")
async def health():
    return {"ok": True}
