import logging

import pytest

from conftest import build_rubric
from domain.errors import SchemaError, UpstreamFormatError
from domain.rubric_shape import criterion_keys, derive_answer_shape, validate_answers


@pytest.mark.parametrize("criteria", [1, 3, 12])
def test_shape_declares_two_required_fields_per_criterion(criteria):
    shape = derive_answer_shape(build_rubric(criteria))

    assert shape.criteria == criteria
    assert len(shape.required) == 2 * criteria
    expected = []
    for i in range(1, criteria + 1):
        expected += [f"performance_observed_{i}", f"example_action_{i}"]
    assert shape.required == expected


def test_shape_field_kinds_and_descriptions():
    shape = derive_answer_shape(build_rubric(1))
    perf, evidence = shape.fields
    assert (perf.kind, perf.criterion) == ("performance", 1)
    assert (evidence.kind, evidence.criterion) == ("evidence", 1)
    assert "criterion 1" in perf.description
    assert "quote" in evidence.description


def test_non_numeric_keys_are_ignored():
    rubric = build_rubric(2, extra_keys={"duration": "10 minutes", "notes": "x"})
    assert criterion_keys(rubric) == ["1", "2"]
    assert derive_answer_shape(rubric).criteria == 2


def test_keys_sorted_numerically():
    rubric = build_rubric(0, extra_keys={"10": "a", "2": "b", "1": "c"})
    assert criterion_keys(rubric) == ["1", "2", "10"]


def test_zero_criteria_fails():
    with pytest.raises(SchemaError):
        derive_answer_shape(build_rubric(0, extra_keys={"duration": "10 minutes"}))


@pytest.mark.parametrize("rubric", [
    {},
    {"rolePlayScenerio": {}},
    {"rolePlayScenerio": {"instruction for roleplay": "not a mapping"}},
    {"rolePlayScenerio": []},
])
def test_missing_instruction_block_fails(rubric):
    with pytest.raises(SchemaError):
        derive_answer_shape(rubric)


def test_validate_answers_drops_extra_keys():
    shape = derive_answer_shape(build_rubric(1))
    payload = {"performance_observed_1": "good", "example_action_1": "said x", "extra": "y"}
    assert validate_answers(shape, payload) == {
        "performance_observed_1": "good",
        "example_action_1": "said x",
    }


def test_validate_answers_reports_missing_fields():
    shape = derive_answer_shape(build_rubric(2))
    with pytest.raises(UpstreamFormatError) as exc:
        validate_answers(shape, {"performance_observed_1": "a", "example_action_1": "b"})
    assert exc.value.details["missing"] == ["performance_observed_2", "example_action_2"]


def test_validate_answers_rejects_non_strings_and_non_objects():
    shape = derive_answer_shape(build_rubric(1))
    with pytest.raises(UpstreamFormatError):
        validate_answers(shape, {"performance_observed_1": 3, "example_action_1": "b"})
    with pytest.raises(UpstreamFormatError):
        validate_answers(shape, ["performance_observed_1"])


def test_non_contiguous_keys_are_numbered_from_one(caplog):
    rubric = build_rubric(0, extra_keys={"7": "c", "1": "a", "3": "b"})

    with caplog.at_level(logging.WARNING, logger="domain.rubric_shape"):
        shape = derive_answer_shape(rubric)

    assert shape.criteria == 3
    assert shape.required == [
        "performance_observed_1", "example_action_1",
        "performance_observed_2", "example_action_2",
        "performance_observed_3", "example_action_3",
    ]
    assert any("not contiguous" in r.getMessage() for r in caplog.records)


def test_contiguous_keys_do_not_warn(caplog):
    with caplog.at_level(logging.WARNING, logger="domain.rubric_shape"):
        derive_answer_shape(build_rubric(3))
    assert not any("not contiguous" in r.getMessage() for r in caplog.records)
