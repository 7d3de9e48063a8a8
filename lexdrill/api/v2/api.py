# Fichier: lexdrill/api/v2/api.py
from fastapi import APIRouter
from .endpoints import (
    drill_router,
    progress_router,
    vocabulary_router,
)

api_router = APIRouter()

api_router.include_router(vocabulary_router.router, prefix="/vocabulary", tags=["Vocabulary"])
api_router.include_router(drill_router.router, prefix="/drill", tags=["Drill"])
api_router.include_router(progress_router.router, prefix="/progress", tags=["Progress"])
