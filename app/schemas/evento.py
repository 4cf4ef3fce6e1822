from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime, timezone

from app.schemas.inscripcion import Inscripcion

# ---------------------------
# helpers
# ---------------------------

def _to_utc(value: Optional[datetime]) -> Optional[datetime]:
    # sem fuso = UTC; com fuso = convertido para UTC
    if value is None:
        return value
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

# ---------------------------
# Evento Schemas
# ---------------------------

class EventoBase(_CamelModel):
    nombre: str
    descripcion: Optional[str] = None
    lugar: str
    fecha_inicio: datetime
    fecha_final: datetime
    organizador_id: int

    @field_validator("fecha_inicio", "fecha_final")
    @classmethod
    def _normaliza_utc(cls, v: datetime) -> datetime:
        return _to_utc(v)


class EventoIn(EventoBase):
    # corpo de escrita: período precisa ser coerente
    @model_validator(mode="after")
    def _check_periodo(self):
        if self.fecha_final < self.fecha_inicio:
            raise ValueError("fechaFinal no puede ser anterior a fechaInicio")
        return self


class EventoCreate(EventoIn):
    # id e numeroAsistentes ficam de fora (gerados no servidor)
    model_config = ConfigDict(extra="forbid")


class EventoReplace(EventoIn):
    # PUT: sobrescrita completa; "id" no corpo é tolerado mas ignorado
    id: Optional[int] = None


class EventoUpdate(_CamelModel):
    nombre: Optional[str] = None
    descripcion: Optional[str] = None
    lugar: Optional[str] = None
    fecha_inicio: Optional[datetime] = None
    fecha_final: Optional[datetime] = None
    organizador_id: Optional[int] = None

    model_config = ConfigDict(extra="forbid")

    # omitir é permitido; null só em campos anuláveis (descripcion)
    @field_validator("nombre", "lugar", "fecha_inicio", "fecha_final", "organizador_id")
    @classmethod
    def _sem_nulos(cls, v):
        if v is None:
            raise ValueError("el campo no puede ser null")
        return v

    @field_validator("fecha_inicio", "fecha_final")
    @classmethod
    def _normaliza_utc_update(cls, v: Optional[datetime]) -> Optional[datetime]:
        return _to_utc(v)

    # Validação só quando ambos forem enviados
    @model_validator(mode="after")
    def _check_periodo_update(self):
        if self.fecha_inicio is not None and self.fecha_final is not None and self.fecha_final < self.fecha_inicio:
            raise ValueError("fechaFinal no puede ser anterior a fechaInicio")
        return self


class Evento(EventoBase):
    id: int
    numero_asistentes: int = 0
    creado_en: Optional[datetime] = None

    @field_validator("creado_en")
    @classmethod
    def _normaliza_creado_en(cls, v: Optional[datetime]) -> Optional[datetime]:
        return _to_utc(v)


class EventoWithRelations(Evento):
    inscripciones: Optional[list[Inscripcion]] = None


class Count(BaseModel):
    count: int
