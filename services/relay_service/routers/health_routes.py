"""Health probe for the relay service."""

from __future__ import annotations

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from services.relay_service.config import Settings

router = APIRouter(route_class=DishkaRoute, tags=["Health"])

# OPTIONS on "/" is a preflight and belongs to the proxy router
HEALTH_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"]


@router.api_route("/", methods=HEALTH_METHODS)
async def health_check(config: FromDishka[Settings]) -> dict[str, str]:
    """Liveness probe. Never contacts the upstream API."""
    return {"status": "ok", "service": config.SERVICE_NAME}
