"""Unit tests for database error translation."""

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from ideabox.domain.error import ConflictError, InternalFailureError
from ideabox.persistence.error import conflict_from_integrity_error, translate_errors


class FakeDriverError(Exception):
    """Stands in for a DBAPI exception carrying Postgres diagnostics."""

    def __init__(self, detail: str | None, sqlstate: str | None = None) -> None:
        super().__init__(detail or "integrity error")
        self.detail = detail
        self.sqlstate = sqlstate


def _integrity_error(detail: str | None, sqlstate: str | None = None) -> IntegrityError:
    return IntegrityError("INSERT ...", {}, FakeDriverError(detail, sqlstate))


class TestConflictFromIntegrityError:
    """Parsing of unique violation details."""

    def test_normalized_prefix_is_dropped(self):
        error = _integrity_error("Key (normalized_email)=(a@b.com) already exists.")

        conflict = conflict_from_integrity_error(error)

        assert conflict is not None
        assert conflict.field == "email"
        assert str(conflict) == "email 'a@b.com' already exists"

    def test_composite_key_names_last_column(self):
        error = _integrity_error(
            "Key (user_id, idea_id)=(1b4e28ba-2fa1-11d2-883f-0016d3cca427, "
            "6fa459ea-ee8a-3ca4-894e-db77e160355e) already exists."
        )

        conflict = conflict_from_integrity_error(error)

        assert conflict is not None
        assert conflict.field == "idea_id"
        assert conflict.value == "6fa459ea-ee8a-3ca4-894e-db77e160355e"

    def test_unique_code_without_detail(self):
        conflict = conflict_from_integrity_error(_integrity_error(None, "23505"))

        assert conflict is not None
        assert conflict.field == "record"

    def test_other_integrity_errors(self):
        error = _integrity_error('null value in column "name" violates not-null', "23502")

        assert conflict_from_integrity_error(error) is None


class TestTranslateErrors:
    """The context manager raising domain errors."""

    def test_unique_violation_becomes_conflict(self):
        with pytest.raises(ConflictError):
            with translate_errors("users.save"):
                raise _integrity_error("Key (normalized_username)=(alice) already exists.")

    def test_other_integrity_error_is_internal(self):
        with pytest.raises(InternalFailureError):
            with translate_errors("ideas.save"):
                raise _integrity_error("foreign key violation", "23503")

    def test_database_outage_is_internal(self):
        with pytest.raises(InternalFailureError) as exc_info:
            with translate_errors("votes.select"):
                raise OperationalError("SELECT 1", {}, Exception("connection refused"))

        assert str(exc_info.value) == "Internal server error"
