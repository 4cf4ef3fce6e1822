from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime, timezone


class InscripcionBase(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    evento_id: int
    participante_id: int


class InscripcionCreate(InscripcionBase):
    pass


class Inscripcion(InscripcionBase):
    id: int
    fecha_inscripcion: Optional[datetime] = None

    @field_validator("fecha_inscripcion")
    @classmethod
    def _normaliza_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v
