from typing import Optional, TYPE_CHECKING
from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import String, Text, Integer, DateTime, Index, func
from app.db.base_class import Base

if TYPE_CHECKING:
    from app.models.inscripcion import Inscripcion

class Evento(Base):
    __tablename__ = "eventos"
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    nombre: Mapped[str] = mapped_column(String(200))
    descripcion: Mapped[Optional[str]] = mapped_column(Text(), nullable=True)
    lugar: Mapped[str] = mapped_column(String(160))
    fecha_inicio: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    fecha_final: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    organizador_id: Mapped[int] = mapped_column(Integer)
    creado_en: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    # sem cascade no ORM: a remoção das inscrições é feita explicitamente pelo controller
    inscripciones: Mapped[list["Inscripcion"]] = relationship(back_populates="evento")

    # numero_asistentes é um column_property definido em app/models/inscripcion.py

    __table_args__ = (
        Index("ix_eventos_lugar_periodo", "lugar", "fecha_inicio", "fecha_final"),
        Index("ix_eventos_organizador_periodo", "organizador_id", "fecha_inicio", "fecha_final"),
    )
