from __future__ import annotations

import os

from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from golfwager.api.health import health as _health_handler
from golfwager.api.routers.cup import router as cup_router
from golfwager.api.routers.games import router as games_router
from golfwager.api.routers.handicap import router as handicap_router
from golfwager.api.routers.settlement import router as settlement_router
from golfwager.metrics import MetricsMiddleware, metrics_app

app = FastAPI(title="golfwager")

allow = os.getenv("CORS_ALLOW_ORIGINS", "http://localhost,http://127.0.0.1").split(",")
app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in allow if o.strip()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(MetricsMiddleware)

app.include_router(games_router)
app.include_router(handicap_router)
app.include_router(settlement_router)
app.include_router(cup_router)
app.add_api_route(
    "/health",
    _health_handler,
    methods=["GET"],
    response_model=None,
    tags=["health"],
)


_metrics_router = APIRouter()


@_metrics_router.get("/metrics", include_in_schema=False)
async def _metrics_endpoint(request: Request):
    return await metrics_app(request)


app.include_router(_metrics_router)
