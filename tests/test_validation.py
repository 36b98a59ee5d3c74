from datetime import date

import pytest

from internify.core.errors import (
    FieldTooLong,
    InvalidDateFormat,
    InvalidDateRange,
    InvalidEmail,
    InvalidStatus,
    MissingField,
)
from internify.models.intern import InternStatus
from internify.schemas.intern import InternCandidate
from internify.services.validation import validate_intern_record


def test_valid_record(intern_payload):
    v = validate_intern_record(intern_payload(fullName="  Jane Smith "))
    assert v.full_name == "Jane Smith"
    assert v.start_date == date(2024, 1, 15)
    assert v.end_date == date(2024, 4, 15)
    assert v.status == InternStatus.completed


def test_snake_case_keys_are_accepted():
    v = validate_intern_record({
        "full_name": "Jane", "domain": "Data", "start_date": "2024-01-01", "end_date": "2024-02-01",
    })
    assert v.full_name == "Jane"


@pytest.mark.parametrize("field", ["fullName", "domain", "startDate", "endDate"])
def test_missing_required_field(intern_payload, field):
    with pytest.raises(MissingField) as exc:
        validate_intern_record(intern_payload(**{field: "  "}))
    assert exc.value.field == field


def test_email_is_optional(intern_payload):
    payload = intern_payload()
    payload.pop("email")
    assert validate_intern_record(payload).email is None
    assert validate_intern_record(intern_payload(email="")).email is None


@pytest.mark.parametrize("email", ["john", "john@example", "jo hn@example.com", "@example.com"])
def test_invalid_email(intern_payload, email):
    with pytest.raises(InvalidEmail):
        validate_intern_record(intern_payload(email=email))


@pytest.mark.parametrize("field,value", [
    ("startDate", "15/01/2024"),
    ("startDate", "2024-02-30"),
    ("endDate", "2024-4-15"),
])
def test_invalid_date_format(intern_payload, field, value):
    with pytest.raises(InvalidDateFormat) as exc:
        validate_intern_record(intern_payload(**{field: value}))
    assert exc.value.field == field


@pytest.mark.parametrize("end", ["2024-01-15", "2024-01-01"])
def test_end_must_be_after_start(intern_payload, end):
    with pytest.raises(InvalidDateRange):
        validate_intern_record(intern_payload(endDate=end))


def test_invalid_status(intern_payload):
    with pytest.raises(InvalidStatus):
        validate_intern_record(intern_payload(status="done"))


def test_status_defaults_to_active(intern_payload):
    assert validate_intern_record(intern_payload(status="")).status == InternStatus.active
    assert validate_intern_record(InternCandidate(
        full_name="A", domain="B", start_date="2024-01-01", end_date="2024-01-02",
    )).status == InternStatus.active


def test_checks_short_circuit_in_order(intern_payload):
    # nome ausente vence e-mail inválido e datas invertidas
    with pytest.raises(MissingField):
        validate_intern_record(intern_payload(fullName="", email="bad", endDate="2020-01-01"))
    # e-mail vem antes do formato de data
    with pytest.raises(InvalidEmail):
        validate_intern_record(intern_payload(email="bad", startDate="nope"))
    # datas antes do status
    with pytest.raises(InvalidDateRange):
        validate_intern_record(intern_payload(endDate="2020-01-01", status="bogus"))


def test_out_of_range_timestamp_is_a_date_format_error(intern_payload):
    with pytest.raises(InvalidDateFormat) as exc:
        validate_intern_record(intern_payload(startDate={"seconds": 10**20}))
    assert exc.value.field == "startDate"


@pytest.mark.parametrize("field,limit", [("fullName", 200), ("email", 200), ("domain", 120)])
def test_field_length_limits(intern_payload, field, limit):
    value = "x" * (limit + 1)
    if field == "email":
        value = "a" * (limit - 11) + "@example.com"
    with pytest.raises(FieldTooLong) as exc:
        validate_intern_record(intern_payload(**{field: value}))
    assert exc.value.field == field
    assert exc.value.details == {"field": field, "max_length": limit}


def test_field_at_limit_is_accepted(intern_payload):
    v = validate_intern_record(intern_payload(fullName="x" * 200, domain="d" * 120))
    assert len(v.full_name) == 200
