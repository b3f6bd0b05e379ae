from __future__ import annotations

from datetime import date
from decimal import Decimal

from school_records.common.fields import FieldSpec, legacy_name_for, normalize, to_store_payload, value_of


def test_legacy_name_for_camel_cases_logical_names():
    assert legacy_name_for("first_name") == "firstName"
    assert legacy_name_for("Head_of_Department") == "headOfDepartment"
    assert legacy_name_for("status") == "status"


def test_current_scheme_wins_over_legacy():
    assert value_of({"first_name_c": "A", "firstName": "B"}, "first_name") == "A"


def test_legacy_used_when_current_missing_or_null():
    assert value_of({"firstName": "B"}, "first_name") == "B"
    assert value_of({"first_name_c": None, "firstName": "B"}, "first_name") == "B"


def test_value_of_missing_everywhere_is_none():
    assert value_of({}, "first_name") is None
    assert value_of(None, "first_name") is None


def test_dotted_legacy_walks_nested_objects():
    record = {"address": {"street": "1 Main St"}}
    assert value_of(record, "street", "address.street") == "1 Main St"
    assert value_of({"address": "flat"}, "street", "address.street") is None


def test_ref_field_accepts_lookup_objects_and_bare_ids():
    spec = FieldSpec.of("student_id", "ref")
    assert spec.read({"student_id_c": {"Id": 7, "Name": "Ann"}}) == 7
    assert spec.read({"studentId": "8"}) == 8
    assert spec.read({"student_id_c": "abc"}) is None


def test_ids_field_accepts_lists_and_comma_strings():
    spec = FieldSpec.of("student_ids", "ids", logical="students")
    assert spec.read({"students_c": [1, {"Id": 2}]}) == (1, 2)
    assert spec.read({"students": "3,4"}) == (3, 4)
    assert spec.read({}) == ()


def test_date_field_reduces_timestamps_to_calendar_days():
    spec = FieldSpec.of("date", "date")
    assert spec.read({"date_c": "2024-03-15"}) == date(2024, 3, 15)
    assert spec.read({"date": "2024-03-15T10:30:00"}) == date(2024, 3, 15)
    assert spec.read({"date_c": "not a date"}) is None


def test_system_field_reads_unsuffixed_key():
    spec = FieldSpec.system("tags", "Tags", "tags")
    assert spec.read({"Tags": ["Math", "Homework"]}) == "Math,Homework"
    assert spec.wire_key == "Tags"


def test_normalize_carries_id_and_mixed_schemes():
    specs = (FieldSpec.of("first_name"), FieldSpec.of("last_name"))
    out = normalize({"Id": "5", "first_name_c": "Ann", "lastName": "Lee"}, specs)
    assert out == {"id": 5, "first_name": "Ann", "last_name": "Lee"}


def test_store_payload_uses_current_keys_and_serializes_values():
    specs = (
        FieldSpec.of("due_date", "date"),
        FieldSpec.of("budget", "decimal", logical="Budget"),
        FieldSpec.of("created", updateable=False),
        FieldSpec.of("notes"),
    )
    payload = to_store_payload(
        {"due_date": date(2024, 3, 20), "budget": Decimal("1500.50"), "created": "x", "notes": None},
        specs,
    )
    assert payload == {"due_date_c": "2024-03-20", "Budget_c": 1500.5, "notes_c": None}
    assert "notes_c" not in to_store_payload({"notes": None}, specs, drop_none=True)
