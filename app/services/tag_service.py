"""
Servicio de tags: envoltorios delgados sobre el repo más validación del id.
"""
from typing import Dict, Any, List

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.core.exceptions import NotFound
from app.repositories import tag_repo
from app.services.validators import parse_id


async def list_tags(db: AsyncIOMotorDatabase) -> List[Dict[str, Any]]:
    return await tag_repo.list_tags(db)


async def get_tag(db: AsyncIOMotorDatabase, tag_id: str) -> Dict[str, Any]:
    doc = await tag_repo.get_tag(db, parse_id(tag_id))
    if doc is None:
        raise NotFound()
    return doc
