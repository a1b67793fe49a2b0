"""Tests for comuni Pydantic schemas."""

import pytest
from pydantic import ValidationError

from comuni_api.schemas.comune import CodiceIstatResponse, ComuneImportRecord, StringListResponse

_ROW = {
    "codice_istat": "021008",
    "denominazione_ita_altra": "Bolzano",
    "denominazione_ita": "Bolzano",
    "denominazione_altra": "Bozen",
    "cap": "39100",
    "sigla_provincia": "BZ",
    "denominazione_provincia": "Bolzano",
    "tipologia_provincia": "Provincia autonoma",
    "codice_regione": "04",
    "denominazione_regione": "Trentino-Alto Adige",
    "tipologia_regione": "statuto speciale",
    "ripartizione_geografica": "Nord-est",
    "flag_capoluogo": "SI",
    "codice_belfiore": "A952",
    "lat": "46.4981",
    "lon": "11.3548",
    "superficie_kmq": "52.29",
}


class TestComuneImportRecord:
    """Tests for ComuneImportRecord validation."""

    def test_valid_row(self) -> None:
        record = ComuneImportRecord.model_validate(_ROW)
        assert record.denominazione_altra == "Bozen"
        assert record.lat == pytest.approx(46.4981)
        assert record.superficie_kmq == pytest.approx(52.29)

    def test_numeric_codes_become_strings(self) -> None:
        record = ComuneImportRecord.model_validate({**_ROW, "cap": 39100, "codice_regione": 4})
        assert record.cap == "39100"
        assert record.codice_regione == "4"

    def test_alternate_names_accept_null(self) -> None:
        record = ComuneImportRecord.model_validate({**_ROW, "denominazione_ita_altra": None, "denominazione_altra": None})
        assert record.denominazione_ita_altra is None
        assert record.denominazione_altra is None

    def test_alternate_name_key_is_required(self) -> None:
        row = dict(_ROW)
        del row["denominazione_altra"]
        with pytest.raises(ValidationError):
            ComuneImportRecord.model_validate(row)

    def test_unparseable_float_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ComuneImportRecord.model_validate({**_ROW, "lon": "east"})

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("cap", "391000"),
            ("codice_istat", "0210080"),
            ("sigla_provincia", "BZN"),
            ("codice_belfiore", "A9520"),
            ("denominazione_altra", "B" * 201),
        ],
    )
    def test_values_wider_than_column_rejected(self, field: str, value: str) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ComuneImportRecord.model_validate({**_ROW, field: value})
        assert exc_info.value.errors()[0]["loc"] == (field,)

    def test_values_at_column_width_accepted(self) -> None:
        record = ComuneImportRecord.model_validate({**_ROW, "denominazione_ita": "B" * 200, "flag_capoluogo": "S" * 10})
        assert len(record.denominazione_ita) == 200

    def test_unknown_keys_ignored(self) -> None:
        record = ComuneImportRecord.model_validate({**_ROW, "popolazione": 107000})
        assert not hasattr(record, "popolazione")


class TestResponses:
    """Tests for lookup response schemas."""

    def test_string_list_response(self) -> None:
        assert StringListResponse(items=["A", "B"]).model_dump() == {"items": ["A", "B"]}

    def test_codice_istat_response(self) -> None:
        assert CodiceIstatResponse(codice_istat="021008").model_dump() == {"codice_istat": "021008"}
