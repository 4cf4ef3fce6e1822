# app/api/v1/evento.py
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session, selectinload

from app.api.deps import get_db, get_where, get_filter, get_filter_excluding_where
from app.core.errors import BookingConflictError, ErrorCode
from app.crud.evento import evento_crud
from app.crud.filters import apply_fields, resolve_fields, resolve_include
from app.crud.inscripcion import inscripcion_crud
from app.models.evento import Evento as EventoModel
from app.schemas.evento import Count, Evento, EventoCreate, EventoReplace, EventoUpdate, EventoWithRelations
from app.schemas.filter import Filter, FilterExcludingWhere
from app.schemas.inscripcion import Inscripcion

logger = logging.getLogger(__name__)

router = APIRouter()

RELATIONS = {"inscripciones": EventoModel.inscripciones}

VENUE_CONFLICT_MSG = "Ya existe un evento en este lugar en el mismo rango de fechas y horas."
ORGANIZER_CONFLICT_MSG = "Este organizador ya tiene un evento programado en el mismo rango de fechas y horas."


def _to_out(e: EventoModel, relations: set[str], fields) -> Dict[str, Any]:
    data = Evento.model_validate(e).model_dump(by_alias=True, mode="json")
    if "inscripciones" in relations:
        data["inscripciones"] = [
            Inscripcion.model_validate(i).model_dump(by_alias=True, mode="json") for i in e.inscripciones
        ]
    return apply_fields(data, fields, keep=relations)


def _load_options(relations: set[str]) -> list:
    return [selectinload(RELATIONS[name]) for name in relations]


@router.post("", response_model=Evento)
def create_evento(body: EventoCreate, db: Session = Depends(get_db)):
    # conflito de lugar e horário
    venue = evento_crud.find_venue_conflicts(
        db, lugar=body.lugar, fecha_inicio=body.fecha_inicio, fecha_final=body.fecha_final
    )
    if venue:
        logger.warning("Conflito de lugar: lugar=%r eventos=%s", body.lugar, [e.id for e in venue])
        raise BookingConflictError(ErrorCode.VENUE_CONFLICT, VENUE_CONFLICT_MSG, [e.id for e in venue])

    # o organizador não pode ter outro evento no mesmo horário
    organizer = evento_crud.find_organizer_conflicts(
        db, organizador_id=body.organizador_id, fecha_inicio=body.fecha_inicio, fecha_final=body.fecha_final
    )
    if organizer:
        logger.warning(
            "Conflito de organizador: organizador=%s eventos=%s", body.organizador_id, [e.id for e in organizer]
        )
        raise BookingConflictError(ErrorCode.ORGANIZER_CONFLICT, ORGANIZER_CONFLICT_MSG, [e.id for e in organizer])

    e = evento_crud.create(db, body)
    logger.info("Evento %s criado (lugar=%r, organizador=%s)", e.id, e.lugar, e.organizador_id)
    return Evento.model_validate(e)


@router.get("/count", response_model=Count)
def count_eventos(where: Optional[Dict[str, Any]] = Depends(get_where), db: Session = Depends(get_db)):
    return Count(count=evento_crud.count(db, where))


@router.get("", responses={200: {"model": List[EventoWithRelations]}})
def list_eventos(filter: Filter = Depends(get_filter), db: Session = Depends(get_db)):
    relations = resolve_include(filter.include, RELATIONS)
    fields = resolve_fields(EventoModel, filter.fields)
    rows = evento_crud.find(db, filter.where, options=_load_options(relations))
    return [_to_out(e, relations, fields) for e in rows]


@router.patch("", response_model=Count)
def update_all_eventos(
    body: EventoUpdate,
    where: Optional[Dict[str, Any]] = Depends(get_where),
    db: Session = Depends(get_db),
):
    updated = evento_crud.update_all(db, body, where)
    logger.info("PATCH /evento: %s eventos atualizados", updated)
    return Count(count=updated)


@router.get("/{evento_id}", responses={200: {"model": EventoWithRelations}})
def get_evento(
    evento_id: int = Path(...),
    filter: FilterExcludingWhere = Depends(get_filter_excluding_where),
    db: Session = Depends(get_db),
):
    relations = resolve_include(filter.include, RELATIONS)
    fields = resolve_fields(EventoModel, filter.fields)
    e = evento_crud.get_by_id(db, evento_id, options=_load_options(relations))
    return _to_out(e, relations, fields)


@router.patch("/{evento_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_evento(evento_id: int, body: EventoUpdate, db: Session = Depends(get_db)):
    # não repete a checagem de conflitos do POST
    evento_crud.update_by_id(db, evento_id, body)
    return None


@router.put("/{evento_id}", status_code=status.HTTP_204_NO_CONTENT)
def replace_evento(evento_id: int, body: EventoReplace, db: Session = Depends(get_db)):
    evento_crud.replace_by_id(db, evento_id, body)
    return None


@router.delete("/{evento_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_evento(evento_id: int, db: Session = Depends(get_db)):
    # remove as inscrições antes do evento, tudo numa transação só
    try:
        inscripciones = inscripcion_crud.find_by_evento(db, evento_id)
        for inscripcion in inscripciones:
            inscripcion_crud.delete_by_id(db, inscripcion.id, commit=False)
        evento_crud.delete_by_id(db, evento_id, commit=False)
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.info("Evento %s removido junto com %s inscrições", evento_id, len(inscripciones))
    return None
