"""Pydantic v2 schemas for comuni import rows and lookup responses."""

from pydantic import BaseModel, ConfigDict, Field


class ComuneImportRecord(BaseModel):
    """One row of the comuni JSON dataset, validated before it becomes a Comune.

    Every key must be present. The two alternate-name keys may carry
    ``null``. Numeric JSON values for code fields (e.g. an unquoted
    ``cap``) are accepted and kept as strings. String lengths are capped
    at the width of the matching comuni column.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True, extra="ignore")

    codice_istat: str = Field(max_length=6)
    denominazione_ita_altra: str | None = Field(max_length=200)
    denominazione_ita: str = Field(max_length=200)
    denominazione_altra: str | None = Field(max_length=200)
    cap: str = Field(max_length=5)
    sigla_provincia: str = Field(max_length=2)
    denominazione_provincia: str = Field(max_length=100)
    tipologia_provincia: str = Field(max_length=100)
    codice_regione: str = Field(max_length=2)
    denominazione_regione: str = Field(max_length=100)
    tipologia_regione: str = Field(max_length=50)
    ripartizione_geografica: str = Field(max_length=50)
    flag_capoluogo: str = Field(max_length=10)
    codice_belfiore: str = Field(max_length=4)
    lat: float
    lon: float
    superficie_kmq: float


class StringListResponse(BaseModel):
    """Distinct values of one comuni column, in ascending order."""

    items: list[str] = Field(description="Distinct values sorted ascending")


class CodiceIstatResponse(BaseModel):
    """A resolved ISTAT municipality code."""

    codice_istat: str
