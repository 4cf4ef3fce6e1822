"""eventos e inscripciones

Revision ID: 3c1f0a7d52e4
Revises:
Create Date: 2025-11-20 10:12:44

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c1f0a7d52e4"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "eventos",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("nombre", sa.String(length=200), nullable=False),
        sa.Column("descripcion", sa.Text(), nullable=True),
        sa.Column("lugar", sa.String(length=160), nullable=False),
        sa.Column("fecha_inicio", sa.DateTime(timezone=True), nullable=False),
        sa.Column("fecha_final", sa.DateTime(timezone=True), nullable=False),
        sa.Column("organizador_id", sa.Integer(), nullable=False),
        sa.Column("creado_en", sa.DateTime(timezone=True), server_default=sa.text("(CURRENT_TIMESTAMP)"), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_eventos")),
    )
    op.create_index("ix_eventos_lugar_periodo", "eventos", ["lugar", "fecha_inicio", "fecha_final"], unique=False)
    op.create_index("ix_eventos_organizador_periodo", "eventos", ["organizador_id", "fecha_inicio", "fecha_final"], unique=False)

    op.create_table(
        "inscripciones",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("evento_id", sa.Integer(), nullable=False),
        sa.Column("participante_id", sa.Integer(), nullable=False),
        sa.Column("fecha_inscripcion", sa.DateTime(timezone=True), server_default=sa.text("(CURRENT_TIMESTAMP)"), nullable=False),
        sa.ForeignKeyConstraint(["evento_id"], ["eventos.id"], name=op.f("fk_inscripciones_evento_id_eventos")),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_inscripciones")),
    )
    op.create_index(op.f("ix_inscripciones_evento_id"), "inscripciones", ["evento_id"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_inscripciones_evento_id"), table_name="inscripciones")
    op.drop_table("inscripciones")
    op.drop_index("ix_eventos_organizador_periodo", table_name="eventos")
    op.drop_index("ix_eventos_lugar_periodo", table_name="eventos")
    op.drop_table("eventos")
