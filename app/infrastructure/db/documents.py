"""Helpers para ids y documentos Mongo (ObjectId <-> str, `_id` -> `id`)."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict

from bson import ObjectId


def now_iso() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def is_valid_id(value: Any) -> bool:
    """Solo acepta ids en texto (24 hex); bytes crudos no llegan por HTTP."""
    return isinstance(value, str) and ObjectId.is_valid(value)


def _plain(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_plain(v) for v in value]
    return value


def to_public(doc: Dict[str, Any]) -> Dict[str, Any]:
    """Expone `id` (str) en lugar de `_id`; el resto de campos pasa tal cual."""
    d = dict(doc)
    oid = d.pop("_id", None)
    out: Dict[str, Any] = {"id": str(oid) if oid is not None else None}
    out.update({k: _plain(v) for k, v in d.items()})
    return out
