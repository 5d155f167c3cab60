"""
Bootstrap de la base Mongo: asegura los índices que sostienen las reglas del API.

- `folders.name` y `tags.name` únicos (fuente de `DuplicateName`).
- `notes.folderId` para que el borrado en cascada no recorra toda la colección.

Se ejecuta al inicio de la app. No tumba la app si algo falla; deja warnings.
"""
from __future__ import annotations

from typing import Any, Dict, List
import logging
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from app.repositories import folder_repo, note_repo, tag_repo

_log = logging.getLogger("folders.mongo.bootstrap")


INDEXES: Dict[str, List[Dict[str, Any]]] = {
    folder_repo.COLLECTION: [
        {"keys": [("name", 1)], "unique": True, "name": "uniq_folder_name"},
    ],
    tag_repo.COLLECTION: [
        {"keys": [("name", 1)], "unique": True, "name": "uniq_tag_name"},
    ],
    note_repo.COLLECTION: [
        {"keys": [(note_repo.FOLDER_FIELD, 1)], "name": "ix_note_folder"},
    ],
}


async def _ensure_indexes(db: AsyncIOMotorDatabase, name: str, indexes: List[Dict[str, Any]]) -> int:
    coll = db[name]
    created = 0
    for ix in indexes:
        opts = dict(ix)
        keys = opts.pop("keys")
        try:
            await coll.create_index(keys, **opts)
            created += 1
        except PyMongoError as e:
            # Ignora fallas de índice (e.g., datos no únicos previos)
            _log.warning("No se pudo crear índice en '%s' (%s): %s", name, keys, e)
    return created


async def ensure_indexes(db: AsyncIOMotorDatabase) -> int:
    """Garantiza índices mínimos; devuelve cuántos quedaron aplicados."""
    total = 0
    for name, indexes in INDEXES.items():
        total += await _ensure_indexes(db, name, indexes)
    _log.info("Índices asegurados: %s", total)
    return total
