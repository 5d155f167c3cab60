"""Health (sin auth), salidas tipadas y estables."""
from fastapi import APIRouter, Depends, status
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.api.schemas.health import PingOut, HealthOut
from app.infrastructure.db.mongo_async import get_async_db, ping as mongo_ping


router = APIRouter(tags=["Health"])  # no prefix to keep paths stable


@router.get("/ping", response_model=PingOut, summary="Ping básico")
async def ping() -> PingOut:
    return PingOut(message="pong")


@router.get("/health", status_code=status.HTTP_200_OK, response_model=HealthOut, summary="Salud básica")
async def health(db: AsyncIOMotorDatabase = Depends(get_async_db)) -> HealthOut:
    return HealthOut(ok=True, db=await mongo_ping(db))
