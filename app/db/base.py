# app/db/base.py
from app.db.base_class import Base  # mantém

# Carrega módulos para registrar tabelas no metadata (alembic/testes):
import app.models.evento        # noqa: F401
import app.models.inscripcion   # noqa: F401

__all__ = ["Base"]
