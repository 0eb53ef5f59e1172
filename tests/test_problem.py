import pytest

import narigama_option


class OhDear(narigama_option.problem.Problem):
    title = "Oh Dear"
    kind = "oh-dear"


class OhDearer(OhDear):
    pass


def raises_problem():
    raise OhDear("Here's a user readable reason.", context={"attempt": 1})


def test_problem_fields():
    with pytest.raises(OhDear) as ex:
        raises_problem()

    assert ex.value.detail == "Here's a user readable reason."
    assert ex.value.context == {"attempt": 1}


def test_problem_to_dict():
    with pytest.raises(OhDear) as ex:
        raises_problem()

    assert ex.value.to_dict() == {
        "kind": "oh-dear",
        "title": "Oh Dear",
        "detail": "Here's a user readable reason.",
        "context": {"attempt": 1},
    }


def test_problem_to_dict_without_context():
    assert OhDear().to_dict() == {
        "kind": "oh-dear",
        "title": "Oh Dear",
        "detail": "No detail provided",
    }


def test_problem_str():
    assert str(OhDear("nope")) == "<OhDear(kind='oh-dear', title='Oh Dear', detail='nope')>"


def test_problem_inherits_fields():
    assert OhDearer("again").to_dict()["kind"] == "oh-dear"


def test_problem_missing_fields():
    with pytest.raises(TypeError) as ex:

        class Incomplete(narigama_option.problem.Problem):
            title = "Incomplete"

    assert str(ex.value) == "Can't build a Problem: Incomplete is missing the field(s): kind"


def test_absent_value_error():
    error = narigama_option.AbsentValueError()

    assert isinstance(error, TypeError)
    assert error.to_dict() == {
        "kind": "absent-value",
        "title": "Op was absent.",
        "detail": "No detail provided",
    }
