"""Endpoints de solo lectura para `tags`."""
from typing import List
from fastapi import APIRouter, Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.api.schemas.folder import TagOut
from app.infrastructure.db.mongo_async import get_async_db
from app.services import tag_service


router = APIRouter(prefix="/tags", tags=["Tags"])


@router.get("", response_model=List[TagOut], summary="Listar tags")
async def list_tags(db: AsyncIOMotorDatabase = Depends(get_async_db)):
    return await tag_service.list_tags(db)


@router.get("/{tag_id}", response_model=TagOut, summary="Obtener tag")
async def get_tag(tag_id: str, db: AsyncIOMotorDatabase = Depends(get_async_db)):
    return await tag_service.get_tag(db, tag_id)
