"""Comuni service — lookups, bulk import and truncate over the comuni table.

Every list lookup is a DISTINCT projection of one column, sorted ascending
on that column. Lookups that find nothing return an empty list or None.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from loguru import logger
from pydantic import ValidationError
from sqlalchemy import ColumnElement, Executable, delete, or_, select, text
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute

from comuni_api.models.comune import Comune
from comuni_api.schemas.comune import ComuneImportRecord


class ComuneImportError(ValueError):
    """Raised when an import row is missing a required key or has a bad value.

    Args:
        index: Zero-based position of the offending row in the input.
        errors: Mapping of field name to a short error description.
    """

    def __init__(self, index: int, errors: dict[str, str]) -> None:
        self.index = index
        self.errors = errors
        detail = ", ".join(f"{field}: {reason}" for field, reason in errors.items())
        super().__init__(f"Invalid comune record at index {index}: {detail}")


def _validate_record(index: int, record: Mapping[str, Any]) -> ComuneImportRecord:
    """Validate one raw import row.

    Raises:
        ComuneImportError: If the row is not an object, lacks a required
            key, or carries an unparseable value.
    """
    try:
        return ComuneImportRecord.model_validate(record)
    except ValidationError as exc:
        errors: dict[str, str] = {}
        for err in exc.errors():
            field = ".".join(str(part) for part in err["loc"]) or "record"
            errors[field] = "missing" if err["type"] == "missing" else err["msg"]
        raise ComuneImportError(index, errors) from exc


class ComuniService:
    """Reference-data lookups over the comuni table.

    Holds no state besides the session it was constructed with; open one
    service per session.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def _distinct(self, column: InstrumentedAttribute[str], *criteria: ColumnElement[bool]) -> list[str]:
        stmt = select(column).distinct().order_by(column.asc())
        if criteria:
            stmt = stmt.where(*criteria)
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def _first_codice_istat(self, *criteria: ColumnElement[bool]) -> str | None:
        # Lowest code wins when a lookup matches more than one comune
        stmt = select(Comune.codice_istat).where(*criteria).order_by(Comune.codice_istat.asc()).limit(1)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    def _matches_comune(comune: str) -> ColumnElement[bool]:
        """Match a comune by ISTAT code or by Italian name."""
        return or_(Comune.codice_istat == comune, Comune.denominazione_ita == comune)

    async def list_comuni(self) -> list[str]:
        """Return every distinct comune name, sorted ascending."""
        return await self._distinct(Comune.denominazione_ita)

    async def list_comuni_by_provincia(self, provincia: str) -> list[str]:
        """Return the distinct comune names in a province.

        Args:
            provincia: Province abbreviation (e.g. "RM"), matched exactly.
        """
        return await self._distinct(Comune.denominazione_ita, Comune.sigla_provincia == provincia)

    async def list_province(self) -> list[str]:
        """Return every distinct province abbreviation, sorted ascending."""
        return await self._distinct(Comune.sigla_provincia)

    async def list_province_by_comune(self, comune: str) -> list[str]:
        """Return the provinces of a comune given its ISTAT code or name.

        A name shared by comuni in different provinces yields every one of
        those provinces.
        """
        return await self._distinct(Comune.sigla_provincia, self._matches_comune(comune))

    async def list_province_by_cap(self, cap: str) -> list[str]:
        """Return the provinces served by a postal code."""
        return await self._distinct(Comune.sigla_provincia, Comune.cap == cap)

    async def list_cap_by_comune(self, comune: str) -> list[str]:
        """Return the postal codes of a comune given its ISTAT code or name."""
        return await self._distinct(Comune.cap, self._matches_comune(comune))

    async def list_cap_by_provincia(self, provincia: str) -> list[str]:
        """Return the distinct postal codes in a province."""
        return await self._distinct(Comune.cap, Comune.sigla_provincia == provincia)

    async def get_codice_istat(self, comune: str, cap: str) -> str | None:
        """Resolve the ISTAT code of a comune from its exact name and CAP.

        Args:
            comune: Italian name of the comune.
            cap: Postal code of the comune.

        Returns:
            The ISTAT code, or None if no comune matches.
        """
        logger.debug(f"Resolving codice ISTAT for comune={comune!r} cap={cap!r}")
        return await self._first_codice_istat(Comune.denominazione_ita == comune, Comune.cap == cap)

    async def get_codice_istat_by_comune(self, comune: str) -> str | None:
        """Resolve the ISTAT code of a comune from its exact name."""
        return await self._first_codice_istat(Comune.denominazione_ita == comune)

    async def get_codice_istat_by_cap(self, cap: str) -> str | None:
        """Resolve an ISTAT code from a postal code."""
        return await self._first_codice_istat(Comune.cap == cap)

    async def import_comuni(self, records: Sequence[Mapping[str, Any]], *, replace: bool = False) -> int:
        """Validate and insert comuni rows in a single commit.

        Every row is validated before anything is staged, so one bad row
        rejects the whole batch. A failed commit is rolled back, leaving
        the table as it was.

        Args:
            records: Raw rows keyed by the dataset's field names
                (``codice_istat``, ``denominazione_ita``, ``cap``, ...).
            replace: Clear the table in the same transaction before
                inserting. Nothing is cleared if any row is invalid.

        Returns:
            Number of rows inserted.

        Raises:
            ComuneImportError: If any row is invalid.
        """
        logger.info(f"Importing {len(records)} comuni records (replace={replace})")

        rows = [_validate_record(index, record) for index, record in enumerate(records)]
        if not rows and not replace:
            return 0

        try:
            if replace:
                await self._session.execute(self._clear_statement())
            self._session.add_all([Comune(**row.model_dump()) for row in rows])
            await self._session.commit()
        except Exception:
            logger.error(f"Import of {len(rows)} comuni records failed, rolling back")
            await self._session.rollback()
            raise

        logger.info(f"Imported {len(rows)} comuni records")
        return len(rows)

    def _clear_statement(self) -> Executable:
        # SQLite has no TRUNCATE
        if self._session.get_bind().dialect.name == "postgresql":
            return text(f"TRUNCATE TABLE {Comune.__tablename__} RESTART IDENTITY")
        return delete(Comune)

    async def truncate(self) -> None:
        """Remove every comune.

        Uses TRUNCATE ... RESTART IDENTITY on PostgreSQL and a plain DELETE
        on backends without TRUNCATE (SQLite).
        """
        await self._session.execute(self._clear_statement())
        await self._session.commit()
        logger.info("Truncated comuni table")
