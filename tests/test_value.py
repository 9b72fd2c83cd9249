import pytest

from jsonoutliner.value import Reference


def test_str_gives_name():
    assert str(Reference("my_reference_name")) == "my_reference_name"


def test_name_attribute():
    assert Reference("abc").name == "abc"


def test_equality_by_name():
    assert Reference("abc") == Reference("abc")
    assert Reference("abc") != Reference("abd")


def test_reference_is_not_a_plain_string():
    ref = Reference("abc")
    assert ref != "abc"
    assert str(ref) == "abc"


def test_hashable_and_usable_as_key():
    table = {Reference("x"): 1}
    assert table[Reference("x")] == 1
    assert len({Reference("x"), Reference("x"), Reference("y")}) == 2


def test_frozen():
    ref = Reference("abc")
    with pytest.raises(AttributeError):
        ref.name = "other"
    assert ref.name == "abc"


def test_reference_inside_containers_compares_equal():
    left = {"a": [Reference("r1"), 1]}
    right = {"a": [Reference("r1"), 1]}
    assert left == right