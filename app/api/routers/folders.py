"""
Endpoints CRUD para `folders`. El borrado resuelve las notas asociadas según
`settings.folder_delete_policy` (cascada por defecto).
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Request, Response, status
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.api.schemas.folder import FolderIn, FolderOut
from app.infrastructure.db.mongo_async import get_async_db
from app.services import folder_service


router = APIRouter(prefix="/folders", tags=["Folders"])


@router.get("", response_model=List[FolderOut], summary="Listar folders")
async def list_folders(db: AsyncIOMotorDatabase = Depends(get_async_db)):
    return await folder_service.list_folders(db)


@router.get("/{folder_id}", response_model=FolderOut, summary="Obtener folder")
async def get_folder(folder_id: str, db: AsyncIOMotorDatabase = Depends(get_async_db)):
    return await folder_service.get_folder(db, folder_id)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=FolderOut,
    summary="Crear folder",
    description="Crea un folder con `name` único. Responde con `Location` al recurso creado.",
)
async def create_folder(
    request: Request,
    response: Response,
    payload: Optional[FolderIn] = None,
    db: AsyncIOMotorDatabase = Depends(get_async_db),
):
    doc = await folder_service.create_folder(db, payload.name if payload else None)
    response.headers["Location"] = f"{request.url.path.rstrip('/')}/{doc['id']}"
    return doc


@router.put("/{folder_id}", response_model=FolderOut, summary="Renombrar folder")
async def update_folder(
    folder_id: str,
    payload: Optional[FolderIn] = None,
    db: AsyncIOMotorDatabase = Depends(get_async_db),
):
    return await folder_service.update_folder(db, folder_id, payload.name if payload else None)


@router.delete(
    "/{folder_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Borrar folder",
    description="Borra el folder y aplica la política configurada sobre sus notas.",
)
async def delete_folder(folder_id: str, db: AsyncIOMotorDatabase = Depends(get_async_db)):
    await folder_service.delete_folder(db, folder_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
