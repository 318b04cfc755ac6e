"""Tests for the thesis update schema: optional, non-null, enum-checked fields."""

import datetime

import pytest
from pydantic import ValidationError

from thesis_admin.models import ThesisStatus
from thesis_admin.schemas.thesis import ThesisResponse, ThesisUpdate


def _error_fields(exc: ValidationError) -> set[str]:
    return {str(e["loc"][0]) for e in exc.errors()}


def test_all_fields_optional():
    assert ThesisUpdate().model_dump(exclude_unset=True) == {}


def test_only_sent_fields_are_set():
    data = ThesisUpdate(category="AI").model_dump(exclude_unset=True)
    assert data == {"category": "AI"}


def test_status_parses_to_enum():
    assert ThesisUpdate(status="Approved").status is ThesisStatus.APPROVED


@pytest.mark.parametrize("status", ["Archived", "approved", ""])
def test_status_outside_enum_rejected(status):
    with pytest.raises(ValidationError) as exc_info:
        ThesisUpdate(status=status)
    assert _error_fields(exc_info.value) == {"status"}


@pytest.mark.parametrize("field", ["title", "author_name"])
def test_empty_strings_rejected_for_required_text(field):
    with pytest.raises(ValidationError) as exc_info:
        ThesisUpdate(**{field: ""})
    assert _error_fields(exc_info.value) == {field}


def test_empty_category_and_abstract_allowed():
    data = ThesisUpdate(category="", abstract="").model_dump(exclude_unset=True)
    assert data == {"category": "", "abstract": ""}


def test_keywords_must_be_strings():
    with pytest.raises(ValidationError):
        ThesisUpdate(keywords=["ok", 3])


@pytest.mark.parametrize("field", ["title", "author_name", "category", "keywords", "abstract", "status"])
def test_explicit_null_rejected(field):
    with pytest.raises(ValidationError) as exc_info:
        ThesisUpdate(**{field: None})
    assert _error_fields(exc_info.value) == {field}


def test_unknown_fields_ignored():
    data = ThesisUpdate.model_validate({"title": "T", "thesis_id": 5}).model_dump(exclude_unset=True)
    assert data == {"title": "T"}


def test_response_timestamps_normalised_to_utc():
    naive = datetime.datetime(2025, 1, 1, 9, 30)
    plus_two = datetime.datetime(2025, 1, 1, 11, 30, tzinfo=datetime.timezone(datetime.timedelta(hours=2)))

    resp = ThesisResponse(
        thesis_id="1", title="X", author_name="alice", category="", keywords=[], abstract="",
        status=ThesisStatus.PENDING, created_at=naive, updated_at=plus_two,
    )

    assert resp.created_at == naive.replace(tzinfo=datetime.timezone.utc)
    assert resp.updated_at.utcoffset() == datetime.timedelta(0)
    assert resp.updated_at.hour == 9
    serialized = resp.model_dump(mode="json")["created_at"]
    assert serialized.endswith(("Z", "+00:00"))
