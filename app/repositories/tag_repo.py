"""Repo de la colección `tags` (solo lectura desde este servicio)."""
from typing import Dict, Any, List, Optional
from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING

from app.infrastructure.db.documents import to_public

COLLECTION = "tags"


async def list_tags(db: AsyncIOMotorDatabase) -> List[Dict[str, Any]]:
    docs = await db[COLLECTION].find({}).sort("name", ASCENDING).to_list(length=None)
    return [to_public(d) for d in docs]


async def get_tag(db: AsyncIOMotorDatabase, tag_id: ObjectId) -> Optional[Dict[str, Any]]:
    doc = await db[COLLECTION].find_one({"_id": tag_id})
    return to_public(doc) if doc else None
