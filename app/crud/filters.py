"""Tradução do filtro JSON da query string para SQLAlchemy.

Formato aceito (estilo LoopBack):

    {"lugar": "Hall1", "fechaInicio": {"gte": "2024-01-01T00:00:00Z"},
     "or": [{"organizadorId": 1}, {"organizadorId": {"inq": [2, 3]}}]}

Campos são aceitos em camelCase ou snake_case. Projeção (``fields``) e
relações (``include``) são resolvidas aqui também, mas aplicadas no router.
"""
import re
from datetime import datetime, timezone
from typing import Any, Iterable, Optional

from pydantic.alias_generators import to_camel
from sqlalchemy import DateTime, Integer, String, and_, inspect as sa_inspect, not_, or_
from sqlalchemy.sql.elements import ColumnElement

from app.core.errors import InvalidFilterError

_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")


def _to_snake(name: str) -> str:
    return _CAMEL_RE.sub("_", name).lower()


def _column(model, key: str):
    attrs = sa_inspect(model).column_attrs
    name = _to_snake(key)
    if name not in attrs:
        raise InvalidFilterError(f"Campo desconocido en filtro: {key}")
    return getattr(model, name), attrs[name].expression.type


_LIST_OPS = {"inq": None, "nin": None, "between": 2}


def _coerce(col_type, value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, (dict, list)):
        raise InvalidFilterError(f"Valor no escalar en filtro: {value!r}")
    if isinstance(col_type, DateTime):
        if not isinstance(value, str):
            raise InvalidFilterError(f"Fecha inválida en filtro: {value!r}")
        try:
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            raise InvalidFilterError(f"Fecha inválida en filtro: {value}")
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone(timezone.utc)
    if isinstance(col_type, Integer) and (isinstance(value, bool) or not isinstance(value, int)):
        raise InvalidFilterError(f"Se esperaba un entero en filtro: {value!r}")
    if isinstance(col_type, String) and not isinstance(value, str):
        raise InvalidFilterError(f"Se esperaba un texto en filtro: {value!r}")
    return value


def _expect_list(op: str, value: Any, size: Optional[int] = None) -> list:
    if not isinstance(value, list) or (size is not None and len(value) != size):
        expected = f"lista de {size} elementos" if size else "lista"
        raise InvalidFilterError(f"El operador '{op}' espera una {expected}")
    return value


def _operator(col, col_type, op: str, raw: Any) -> ColumnElement:
    if op in _LIST_OPS:
        value = [_coerce(col_type, v) for v in _expect_list(op, raw, _LIST_OPS[op])]
    else:
        value = _coerce(col_type, raw)
    if op == "eq":
        return col.is_(None) if value is None else col == value
    if op == "neq":
        return col.is_not(None) if value is None else col != value
    if op == "gt":
        return col > value
    if op == "gte":
        return col >= value
    if op == "lt":
        return col < value
    if op == "lte":
        return col <= value
    if op == "inq":
        return col.in_(value)
    if op == "nin":
        return col.not_in(value)
    if op == "between":
        low, high = value
        return col.between(low, high)
    if op == "like":
        return col.like(value)
    if op == "nlike":
        return not_(col.like(value))
    if op == "ilike":
        return col.ilike(value)
    if op == "nilike":
        return not_(col.ilike(value))
    raise InvalidFilterError(f"Operador desconocido en filtro: {op}")


def _clauses(model, where: dict) -> list[ColumnElement]:
    if not isinstance(where, dict):
        raise InvalidFilterError("La cláusula where debe ser un objeto")

    conds: list[ColumnElement] = []
    for key, value in where.items():
        if key in ("and", "or"):
            if not isinstance(value, list) or not value:
                raise InvalidFilterError(f"'{key}' espera una lista de condiciones")
            parts = [and_(*sub_conds) for sub_conds in (_clauses(model, sub) for sub in value) if sub_conds]
            if parts:
                conds.append(and_(*parts) if key == "and" else or_(*parts))
            continue

        col, col_type = _column(model, key)
        if isinstance(value, dict):
            if not value:
                raise InvalidFilterError(f"Condición vacía para el campo {key}")
            conds.extend(_operator(col, col_type, op, v) for op, v in value.items())
        else:
            conds.append(_operator(col, col_type, "eq", value))
    return conds


def build_where(model, where: Optional[dict]) -> Optional[ColumnElement]:
    """Converte um where JSON em expressão SQLAlchemy (None = sem filtro)."""
    if not where:
        return None
    conds = _clauses(model, where)
    return and_(*conds) if conds else None


def resolve_fields(model, fields: Any) -> Optional[tuple[set[str], set[str]]]:
    """Normaliza ``fields`` para (incluídos, excluídos) em camelCase."""
    if not fields:
        return None
    if isinstance(fields, list):
        fields = {name: True for name in fields}
    included, excluded = set(), set()
    for key, flag in fields.items():
        _column(model, key)  # valida o nome
        (included if flag else excluded).add(to_camel(_to_snake(key)))
    return included, excluded


def apply_fields(data: dict, spec: Optional[tuple[set[str], set[str]]], keep: Iterable[str] = ()) -> dict:
    """Aplica a projeção; chaves em ``keep`` (relações incluídas) sempre ficam."""
    if spec is None:
        return data
    included, excluded = spec
    keep = set(keep)
    if included:
        return {k: v for k, v in data.items() if k in included or k in keep}
    return {k: v for k, v in data.items() if k not in excluded or k in keep}


def resolve_include(include: Optional[Iterable[Any]], allowed: Iterable[str]) -> set[str]:
    relations: set[str] = set()
    allowed = set(allowed)
    for item in include or []:
        name = item.get("relation") if isinstance(item, dict) else item
        if name not in allowed:
            raise InvalidFilterError(f"Relación desconocida: {name}")
        relations.add(name)
    return relations
