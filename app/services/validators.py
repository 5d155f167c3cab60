"""Validaciones de entrada compartidas; se ejecutan antes de cualquier llamada a Mongo."""
from typing import Optional

from bson import ObjectId

from app.core.exceptions import InvalidIdentifier, ValidationError
from app.infrastructure.db.documents import is_valid_id


def parse_id(raw: str) -> ObjectId:
    if not is_valid_id(raw):
        raise InvalidIdentifier()
    return ObjectId(raw)


def require_field(value: Optional[str], field: str) -> str:
    # Cadena vacía cuenta como ausente
    if not value:
        raise ValidationError(f"Missing `{field}` in request body")
    return value
