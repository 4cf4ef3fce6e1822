import json
from typing import Any, Dict, Optional

from fastapi import Query
from pydantic import ValidationError

from app.core.errors import InvalidFilterError
from app.db.session import get_db
from app.schemas.filter import Filter, FilterExcludingWhere

__all__ = ["get_db", "get_where", "get_filter", "get_filter_excluding_where"]

# ----------------------------------------------------------------------
# Filtros chegam como JSON na query string (?filter={...} / ?where={...})
# ----------------------------------------------------------------------
def _load_json(raw: Optional[str], name: str) -> Any:
    if raw is None or not raw.strip():
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise InvalidFilterError(f"Parámetro '{name}' no es JSON válido: {exc.msg}")

def get_where(
    where: Optional[str] = Query(None, description='Predicado JSON, ej. {"lugar": "Hall1"}'),
) -> Optional[Dict[str, Any]]:
    data = _load_json(where, "where")
    if data is not None and not isinstance(data, dict):
        raise InvalidFilterError("Parámetro 'where' debe ser un objeto JSON")
    return data

def get_filter(
    filter: Optional[str] = Query(None, description='Filtro JSON: {"where": {...}, "fields": {...}, "include": [...]}'),
) -> Filter:
    data = _load_json(filter, "filter")
    try:
        return Filter.model_validate(data or {})
    except ValidationError as exc:
        raise InvalidFilterError(f"Filtro inválido: {exc.errors()[0]['msg']}")

def get_filter_excluding_where(
    filter: Optional[str] = Query(None, description='Filtro JSON sin where: {"fields": {...}, "include": [...]}'),
) -> FilterExcludingWhere:
    data = _load_json(filter, "filter")
    try:
        return FilterExcludingWhere.model_validate(data or {})
    except ValidationError as exc:
        raise InvalidFilterError(f"Filtro inválido: {exc.errors()[0]['msg']}")
