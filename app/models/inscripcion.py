from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column, relationship, column_property
from sqlalchemy import ForeignKey, Integer, DateTime, func, select
from app.db.base_class import Base
from app.models.evento import Evento

class Inscripcion(Base):
    __tablename__ = "inscripciones"
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    evento_id: Mapped[int] = mapped_column(ForeignKey("eventos.id"), index=True)
    participante_id: Mapped[int] = mapped_column(Integer)
    fecha_inscripcion: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    evento: Mapped[Evento] = relationship(back_populates="inscripciones")


# Número de assistentes calculado no banco; não existe coluna gravável.
Evento.numero_asistentes = column_property(
    select(func.count(Inscripcion.id))
    .where(Inscripcion.evento_id == Evento.id)
    .correlate_except(Inscripcion)
    .scalar_subquery()
)
