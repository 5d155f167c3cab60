"""
Esquemas Pydantic para `folders` y `tags`.

El body de entrada deja `name` opcional: su ausencia se reporta como 400
desde el servicio, no como 422 de validación de esquema.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict


class FolderIn(BaseModel):
    name: Optional[str] = None


class FolderOut(BaseModel):
    # Campos extra del documento (timestamps, etc.) pasan tal cual
    model_config = ConfigDict(extra="allow")

    id: str
    name: str


class TagOut(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    name: str
