"""Agregador de routers de la API."""
from fastapi import APIRouter
from app.api.routers import folders, health, tags

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(folders.router)
api_router.include_router(tags.router)
