"""Repo de la colección `notes`.

Las notas pertenecen a otro servicio; aquí solo se tocan en función de un
folder (cascada, desvinculación, conteo). `folderId` puede estar guardado como
ObjectId o como su texto hex, así que se comparan ambas formas.
"""
from typing import Dict, Any
from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.infrastructure.db.documents import now_iso

COLLECTION = "notes"
FOLDER_FIELD = "folderId"


def _by_folder(folder_id: ObjectId) -> Dict[str, Any]:
    return {FOLDER_FIELD: {"$in": [folder_id, str(folder_id)]}}


async def delete_notes_by_folder(db: AsyncIOMotorDatabase, folder_id: ObjectId) -> int:
    """Borra las notas del folder; devuelve cuántas se eliminaron."""
    res = await db[COLLECTION].delete_many(_by_folder(folder_id))
    return res.deleted_count


async def unset_folder(db: AsyncIOMotorDatabase, folder_id: ObjectId) -> int:
    """Quita `folderId` de las notas del folder; devuelve cuántas cambiaron."""
    res = await db[COLLECTION].update_many(
        _by_folder(folder_id),
        {"$unset": {FOLDER_FIELD: ""}, "$set": {"updated_at": now_iso()}},
    )
    return res.modified_count


async def count_notes_by_folder(db: AsyncIOMotorDatabase, folder_id: ObjectId) -> int:
    return await db[COLLECTION].count_documents(_by_folder(folder_id))
