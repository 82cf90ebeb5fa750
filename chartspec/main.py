from __future__ import annotations

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .core.settings import get_settings
from .routes.chart import router as chart_router

load_dotenv()

app = FastAPI(title="chartspec API", version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(chart_router)


@app.on_event("startup")
async def load_settings() -> None:
    get_settings()


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
