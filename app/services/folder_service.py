"""
Servicio de folders: valida entrada, traduce errores del store y aplica la
política de borrado sobre las notas asociadas.

Toda validación ocurre antes de tocar Mongo; de los errores de pymongo solo se
reinterpreta `DuplicateKeyError`, el resto se propaga intacto.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError

from app.core.config import settings
from app.core.exceptions import DuplicateName, FolderInUse, NotFound
from app.repositories import folder_repo, note_repo
from app.services.validators import parse_id, require_field

_log = logging.getLogger("folders.service")

DUPLICATE_MESSAGE = "The folder name already exists"


async def list_folders(db: AsyncIOMotorDatabase) -> List[Dict[str, Any]]:
    return await folder_repo.list_folders(db)


async def get_folder(db: AsyncIOMotorDatabase, folder_id: str) -> Dict[str, Any]:
    oid = parse_id(folder_id)
    doc = await folder_repo.get_folder(db, oid)
    if doc is None:
        raise NotFound()
    return doc


async def create_folder(db: AsyncIOMotorDatabase, name: Optional[str]) -> Dict[str, Any]:
    name = require_field(name, "name")
    try:
        doc = await folder_repo.insert_folder(db, name)
    except DuplicateKeyError:
        raise DuplicateName(DUPLICATE_MESSAGE)
    _log.info("Folder creado id=%s", doc["id"])
    return doc


async def update_folder(db: AsyncIOMotorDatabase, folder_id: str, name: Optional[str]) -> Dict[str, Any]:
    name = require_field(name, "name")
    oid = parse_id(folder_id)
    try:
        doc = await folder_repo.update_folder_name(db, oid, name)
    except DuplicateKeyError:
        raise DuplicateName(DUPLICATE_MESSAGE)
    if doc is None:
        raise NotFound()
    return doc


async def delete_folder(db: AsyncIOMotorDatabase, folder_id: str, policy: Optional[str] = None) -> None:
    """Borra un folder y resuelve sus notas según `policy`.

    - cascade: borra folder y notas en paralelo.
    - set_null: borra folder y desvincula las notas en paralelo.
    - restrict: rechaza con `FolderInUse` si quedan notas.

    No es transaccional: si una de las dos operaciones falla la otra puede
    haberse aplicado. Solo el resultado del folder decide 404 vs éxito.
    """
    oid = parse_id(folder_id)
    policy = policy or settings.folder_delete_policy

    if policy == "restrict":
        in_use = await note_repo.count_notes_by_folder(db, oid)
        if in_use:
            raise FolderInUse(f"The folder has {in_use} note(s); remove them first")
        deleted = await folder_repo.delete_folder(db, oid)
        if deleted is None:
            raise NotFound()
        return

    if policy == "set_null":
        notes_op = note_repo.unset_folder(db, oid)
    elif policy == "cascade":
        notes_op = note_repo.delete_notes_by_folder(db, oid)
    else:
        raise ValueError(f"Unknown folder delete policy: {policy}")

    # Espera ambas operaciones aunque una falle; luego propaga el primer error
    results = await asyncio.gather(folder_repo.delete_folder(db, oid), notes_op, return_exceptions=True)
    for res in results:
        if isinstance(res, BaseException):
            raise res
    deleted, notes_affected = results
    if deleted is None:
        raise NotFound()
    _log.info("Folder borrado id=%s policy=%s notes=%s", folder_id, policy, notes_affected)
