from datetime import datetime
from typing import List
from sqlalchemy import select, and_
from sqlalchemy.orm import Session
from app.crud.base import CRUDBase
from app.models.evento import Evento
from app.schemas.evento import EventoCreate, EventoUpdate

class CRUDEvento(CRUDBase[Evento, EventoCreate, EventoUpdate]):
    @staticmethod
    def _overlaps(fecha_inicio: datetime, fecha_final: datetime):
        # intervalo fechado: encostar na borda também é conflito
        return and_(Evento.fecha_inicio <= fecha_final, Evento.fecha_final >= fecha_inicio)

    def find_venue_conflicts(self, db: Session, *, lugar: str, fecha_inicio: datetime, fecha_final: datetime) -> List[Evento]:
        stmt = select(Evento).where(Evento.lugar == lugar, self._overlaps(fecha_inicio, fecha_final))
        return list(db.scalars(stmt).all())

    def find_organizer_conflicts(self, db: Session, *, organizador_id: int, fecha_inicio: datetime, fecha_final: datetime) -> List[Evento]:
        stmt = select(Evento).where(Evento.organizador_id == organizador_id, self._overlaps(fecha_inicio, fecha_final))
        return list(db.scalars(stmt).all())

evento_crud = CRUDEvento(Evento)
