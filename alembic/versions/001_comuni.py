"""Create comuni table for the Italian municipality reference dataset.

Revision ID: 001
Revises:
Create Date: 2026-10-19
"""

import sqlalchemy as sa
from alembic import op

revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "comuni",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("codice_istat", sa.String(6), nullable=False),
        sa.Column("codice_belfiore", sa.String(4), nullable=False),
        sa.Column("denominazione_ita", sa.String(200), nullable=False),
        sa.Column("denominazione_ita_altra", sa.String(200), nullable=True),
        sa.Column("denominazione_altra", sa.String(200), nullable=True),
        sa.Column("cap", sa.String(5), nullable=False),
        sa.Column("sigla_provincia", sa.String(2), nullable=False),
        sa.Column("denominazione_provincia", sa.String(100), nullable=False),
        sa.Column("tipologia_provincia", sa.String(100), nullable=False),
        sa.Column("codice_regione", sa.String(2), nullable=False),
        sa.Column("denominazione_regione", sa.String(100), nullable=False),
        sa.Column("tipologia_regione", sa.String(50), nullable=False),
        sa.Column("ripartizione_geografica", sa.String(50), nullable=False),
        sa.Column("flag_capoluogo", sa.String(10), nullable=False),
        sa.Column("lat", sa.Float(), nullable=False),
        sa.Column("lon", sa.Float(), nullable=False),
        sa.Column("superficie_kmq", sa.Float(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_comuni_codice_istat", "comuni", ["codice_istat"])
    op.create_index("ix_comuni_denominazione_ita", "comuni", ["denominazione_ita"])
    op.create_index("ix_comuni_sigla_provincia", "comuni", ["sigla_provincia"])
    op.create_index("ix_comuni_cap", "comuni", ["cap"])


def downgrade() -> None:
    op.drop_index("ix_comuni_cap", table_name="comuni")
    op.drop_index("ix_comuni_sigla_provincia", table_name="comuni")
    op.drop_index("ix_comuni_denominazione_ita", table_name="comuni")
    op.drop_index("ix_comuni_codice_istat", table_name="comuni")
    op.drop_table("comuni")
