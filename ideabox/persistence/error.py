"""Translation of database errors into domain errors."""

import re
from contextlib import contextmanager
from typing import Iterator

import logfire
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from ideabox.domain.error import ConflictError, InternalFailureError

UNIQUE_VIOLATION = "23505"

# Postgres detail for unique violations: Key (normalized_email)=(a@b.com) already exists.
_UNIQUE_DETAIL = re.compile(r'Key \("?(?P<field>[^)"]+)"?\)=\((?P<value>.*)\) already exists')


def _pg_detail(error: IntegrityError) -> str:
    orig = error.orig
    detail = getattr(orig, "detail", None)
    if detail is None:
        # asyncpg exceptions are chained behind the DBAPI adapter
        detail = getattr(getattr(orig, "__cause__", None), "detail", None)
    return detail or str(orig)


def _pg_code(error: IntegrityError) -> str | None:
    orig = error.orig
    return getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)


def conflict_from_integrity_error(error: IntegrityError) -> ConflictError | None:
    """Build a ConflictError for a unique violation, None for other integrity errors.

    Column names are reported without their ``normalized_`` prefix, so a
    duplicate sign up reads "email 'a@b.com' already exists".
    """
    match = _UNIQUE_DETAIL.search(_pg_detail(error))
    if match:
        field = match.group("field").removeprefix("normalized_")
        # Composite keys report every column; name the last one
        field = field.split(", ")[-1]
        value = match.group("value").split(", ")[-1]
        return ConflictError(field, value)
    if _pg_code(error) == UNIQUE_VIOLATION:
        return ConflictError("record")
    return None


@contextmanager
def translate_errors(operation: str) -> Iterator[None]:
    """Re-raise database errors from the wrapped block as domain errors.

    Raises:
        ConflictError: On a unique violation
        InternalFailureError: On any other database error
    """
    try:
        yield
    except IntegrityError as e:
        conflict = conflict_from_integrity_error(e)
        if conflict:
            logfire.info("Unique violation", operation=operation, error=str(conflict))
            raise conflict from e
        logfire.error("Integrity error", operation=operation, error=str(e.orig))
        raise InternalFailureError() from e
    except SQLAlchemyError as e:
        logfire.error("Database error", operation=operation, error=str(e))
        raise InternalFailureError() from e
