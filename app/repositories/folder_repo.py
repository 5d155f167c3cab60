"""Repo de la colección `folders`.

- Expone `id` (str) en lugar de `_id`.
- Sella timestamps en ISO-8601 UTC (Z).
- No traduce errores de pymongo; eso es responsabilidad del servicio.
"""
from typing import Dict, Any, List, Optional
from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING, ReturnDocument

from app.infrastructure.db.documents import now_iso, to_public

COLLECTION = "folders"


async def list_folders(db: AsyncIOMotorDatabase) -> List[Dict[str, Any]]:
    """Todos los folders ordenados por `name` asc."""
    docs = await db[COLLECTION].find({}).sort("name", ASCENDING).to_list(length=None)
    return [to_public(d) for d in docs]


async def get_folder(db: AsyncIOMotorDatabase, folder_id: ObjectId) -> Optional[Dict[str, Any]]:
    doc = await db[COLLECTION].find_one({"_id": folder_id})
    return to_public(doc) if doc else None


async def insert_folder(db: AsyncIOMotorDatabase, name: str) -> Dict[str, Any]:
    """Inserta y devuelve el documento creado (con `id`)."""
    now = now_iso()
    data: Dict[str, Any] = {"name": name, "created_at": now, "updated_at": now}
    res = await db[COLLECTION].insert_one(data)
    data["_id"] = res.inserted_id
    return to_public(data)


async def update_folder_name(db: AsyncIOMotorDatabase, folder_id: ObjectId, name: str) -> Optional[Dict[str, Any]]:
    """Actualiza `name` y devuelve el documento nuevo, o None si no existe."""
    doc = await db[COLLECTION].find_one_and_update(
        {"_id": folder_id},
        {"$set": {"name": name, "updated_at": now_iso()}},
        return_document=ReturnDocument.AFTER,
    )
    return to_public(doc) if doc else None


async def delete_folder(db: AsyncIOMotorDatabase, folder_id: ObjectId) -> Optional[Dict[str, Any]]:
    """Borra el folder y devuelve el documento eliminado, o None si no existía."""
    doc = await db[COLLECTION].find_one_and_delete({"_id": folder_id})
    return to_public(doc) if doc else None
