"""Comune model — Italian municipality reference records.

One row per (municipality, postal code) pair from the ISTAT-derived comuni
dataset. Column names follow the dataset's own keys so an import row maps
onto the entity field for field:

    codice_istat             ISTAT municipality code (stable identity)
    denominazione_ita        official Italian name
    denominazione_ita_altra  alternate Italian name
    denominazione_altra      name in a minority language
    cap                      postal code (CAP)
    sigla_provincia          province abbreviation (e.g. "RM")
    codice_belfiore          cadastral code used in the codice fiscale
    superficie_kmq           area in square kilometres

The table is only written by bulk import and cleared by truncate.
"""

from datetime import datetime

from sqlalchemy import DateTime, Float, Index, String, func
from sqlalchemy.orm import Mapped, mapped_column

from comuni_api.models.base import Base, UUIDMixin


class Comune(Base, UUIDMixin):
    """Italian municipality as of a reference dataset snapshot."""

    __tablename__ = "comuni"

    # Identifiers
    codice_istat: Mapped[str] = mapped_column(String(6), nullable=False)
    codice_belfiore: Mapped[str] = mapped_column(String(4), nullable=False)

    # Names
    denominazione_ita: Mapped[str] = mapped_column(String(200), nullable=False)
    denominazione_ita_altra: Mapped[str | None] = mapped_column(String(200), nullable=True)
    denominazione_altra: Mapped[str | None] = mapped_column(String(200), nullable=True)

    cap: Mapped[str] = mapped_column(String(5), nullable=False)

    # Province
    sigla_provincia: Mapped[str] = mapped_column(String(2), nullable=False)
    denominazione_provincia: Mapped[str] = mapped_column(String(100), nullable=False)
    tipologia_provincia: Mapped[str] = mapped_column(String(100), nullable=False)

    # Region
    codice_regione: Mapped[str] = mapped_column(String(2), nullable=False)
    denominazione_regione: Mapped[str] = mapped_column(String(100), nullable=False)
    tipologia_regione: Mapped[str] = mapped_column(String(50), nullable=False)
    ripartizione_geografica: Mapped[str] = mapped_column(String(50), nullable=False)

    flag_capoluogo: Mapped[str] = mapped_column(String(10), nullable=False)

    # Geography
    lat: Mapped[float] = mapped_column(Float, nullable=False)
    lon: Mapped[float] = mapped_column(Float, nullable=False)
    superficie_kmq: Mapped[float] = mapped_column(Float, nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (
        Index("ix_comuni_codice_istat", "codice_istat"),
        Index("ix_comuni_denominazione_ita", "denominazione_ita"),
        Index("ix_comuni_sigla_provincia", "sigla_provincia"),
        Index("ix_comuni_cap", "cap"),
    )
