# app/api/v1/router.py
from fastapi import APIRouter
from app.api.v1 import evento

api_router = APIRouter()

api_router.include_router(evento.router, prefix="/evento", tags=["evento"])
