# app/models/__init__.py
from app.models.evento import Evento
from app.models.inscripcion import Inscripcion

__all__ = ["Evento", "Inscripcion"]
