from datetime import datetime, timezone

import pytest

from app.core.errors import InvalidFilterError
from app.crud.evento import evento_crud
from app.crud.filters import apply_fields, build_where, resolve_fields, resolve_include
from app.models.evento import Evento
from app.schemas.evento import EventoCreate


def _crear(db, nombre, lugar, organizador_id, inicio, final, descripcion=None):
    return evento_crud.create(db, EventoCreate(
        nombre=nombre,
        descripcion=descripcion,
        lugar=lugar,
        fecha_inicio=inicio,
        fecha_final=final,
        organizador_id=organizador_id,
    ))


@pytest.fixture()
def eventos(db):
    utc = timezone.utc
    return [
        _crear(db, "Apertura", "Hall1", 1, datetime(2024, 1, 1, 10, tzinfo=utc), datetime(2024, 1, 1, 12, tzinfo=utc)),
        _crear(db, "Taller Python", "Hall2", 2, datetime(2024, 1, 2, 10, tzinfo=utc), datetime(2024, 1, 2, 12, tzinfo=utc), "práctico"),
        _crear(db, "Cierre", "Hall1", 3, datetime(2024, 1, 3, 10, tzinfo=utc), datetime(2024, 1, 3, 12, tzinfo=utc)),
    ]


def _nombres(rows):
    return sorted(e.nombre for e in rows)


def test_empty_where_is_no_filter():
    assert build_where(Evento, None) is None
    assert build_where(Evento, {}) is None


def test_equality_accepts_camel_and_snake_case(db, eventos):
    assert _nombres(evento_crud.find(db, {"organizadorId": 2})) == ["Taller Python"]
    assert _nombres(evento_crud.find(db, {"organizador_id": 2})) == ["Taller Python"]


def test_comparison_operators_on_dates(db, eventos):
    rows = evento_crud.find(db, {"fechaInicio": {"gt": "2024-01-01T10:00:00Z", "lte": "2024-01-02T10:00:00Z"}})
    assert _nombres(rows) == ["Taller Python"]

    rows = evento_crud.find(db, {"fechaFinal": {"between": ["2024-01-01T00:00:00Z", "2024-01-02T23:59:59Z"]}})
    assert _nombres(rows) == ["Apertura", "Taller Python"]


def test_list_operators(db, eventos):
    assert _nombres(evento_crud.find(db, {"organizadorId": {"inq": [1, 3]}})) == ["Apertura", "Cierre"]
    assert _nombres(evento_crud.find(db, {"organizadorId": {"nin": [1, 3]}})) == ["Taller Python"]


def test_like_operators(db, eventos):
    assert _nombres(evento_crud.find(db, {"nombre": {"like": "Taller%"}})) == ["Taller Python"]
    assert _nombres(evento_crud.find(db, {"nombre": {"nlike": "%e%"}})) == []
    assert _nombres(evento_crud.find(db, {"nombre": {"ilike": "%PYTHON"}})) == ["Taller Python"]


def test_null_equality(db, eventos):
    assert _nombres(evento_crud.find(db, {"descripcion": None})) == ["Apertura", "Cierre"]
    assert _nombres(evento_crud.find(db, {"descripcion": {"neq": None}})) == ["Taller Python"]


def test_and_or_nesting(db, eventos):
    where = {"or": [{"and": [{"lugar": "Hall1"}, {"organizadorId": 3}]}, {"lugar": "Hall2"}]}
    assert _nombres(evento_crud.find(db, where)) == ["Cierre", "Taller Python"]
    assert evento_crud.count(db, where) == 2


def test_numero_asistentes_is_filterable(db, eventos, inscribir):
    inscribir(eventos[0].id, 1)
    assert _nombres(evento_crud.find(db, {"numeroAsistentes": {"gt": 0}})) == ["Apertura"]


@pytest.mark.parametrize("where", [
    {"inexistente": 1},
    {"lugar": {"cerca": "Hall1"}},
    {"lugar": {}},
    {"organizadorId": {"inq": 1}},
    {"fechaInicio": {"between": ["2024-01-01T00:00:00Z"]}},
    {"fechaInicio": {"gt": "ayer"}},
    {"or": {"lugar": "Hall1"}},
    {"organizadorId": [1, 2]},
    {"organizadorId": {"gt": {"a": 1}}},
    {"organizadorId": "uno"},
    {"organizadorId": {"inq": [1, [2]]}},
    {"organizadorId": True},
    {"fechaInicio": 5},
    {"fechaInicio": {"between": ["2024-01-01T00:00:00Z", 20240102]}},
    {"lugar": 7},
    {"nombre": {"like": ["Taller%"]}},
])
def test_invalid_where_raises(where):
    with pytest.raises(InvalidFilterError):
        build_where(Evento, where)


def test_fields_projection_helpers():
    data = {"id": 1, "lugar": "Hall1", "nombre": "A", "inscripciones": []}
    spec = resolve_fields(Evento, ["id", "fecha_inicio"])
    assert spec == ({"id", "fechaInicio"}, set())
    assert apply_fields(data, spec, keep={"inscripciones"}) == {"id": 1, "inscripciones": []}
    assert apply_fields(data, resolve_fields(Evento, {"nombre": False})) == {"id": 1, "lugar": "Hall1", "inscripciones": []}
    assert apply_fields(data, None) is data
    with pytest.raises(InvalidFilterError):
        resolve_fields(Evento, {"color": True})


def test_include_helper():
    assert resolve_include(None, {"inscripciones"}) == set()
    assert resolve_include(["inscripciones", {"relation": "inscripciones"}], {"inscripciones"}) == {"inscripciones"}
    with pytest.raises(InvalidFilterError):
        resolve_include([{"relation": "organizador"}], {"inscripciones"})
