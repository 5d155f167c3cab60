"""Entrada principal de la app FastAPI (configura middlewares, excepciones y routers)."""
from fastapi import FastAPI
from app.core.config import settings
from app.infrastructure.db.mongo_async import get_async_db, ping, close_async_client
from app.infrastructure.db.bootstrap import ensure_indexes
from app.api.router import api_router
from app.core.logging import setup_logging
from app.core.middleware import add_middlewares
from app.core.exceptions import register_exception_handlers
import logging

_log = logging.getLogger("folders.startup")

setup_logging(settings.log_level)
app = FastAPI(title=settings.app_name)

add_middlewares(app)
register_exception_handlers(app)


@app.on_event("startup")
async def on_startup():
    db = get_async_db()
    # Garantiza índices únicos si hay conexión; no impide el arranque
    if await ping(db):
        await ensure_indexes(db)
    else:
        _log.warning("Mongo no listo; omitiendo ensure_indexes()")


@app.on_event("shutdown")
async def on_shutdown():
    close_async_client()


# Monta routers bajo el prefijo configurado ("/" equivale a sin prefijo)
app.include_router(api_router, prefix=settings.api_prefix_normalized.rstrip("/"))
