import pytest

from daubechies_filters.exceptions import (
    FilterError,
    InvalidOrderError,
    InvalidSideError,
    IndexOutOfRangeError,
    InvalidFilterError,
)


@pytest.mark.parametrize(
    "exception,builtin",
    [
        (InvalidOrderError(0, "interior", 1), ValueError),
        (InvalidSideError("X"), ValueError),
        (IndexOutOfRangeError(3, 3), IndexError),
        (InvalidFilterError("Broken."), AssertionError),
    ],
)
def test_exception_hierarchy(exception, builtin):
    assert isinstance(exception, FilterError)
    assert isinstance(exception, builtin)


class TestInvalidOrderError:
    def test_range(self):
        e = InvalidOrderError(9, "left boundary", 2, 8)
        assert e.order == 9
        assert e.kind == "left boundary"
        assert str(e) == "No left boundary filter is available with 9 vanishing moments."
        assert "between 2 and 8 (inclusive)" in e.explain()

    def test_minimum_only(self):
        e = InvalidOrderError(-1, "interior", 1)
        assert "must be at least 1" in e.explain()

    def test_maximum_only(self):
        e = InvalidOrderError(100, "interior", maximum=38)
        assert "must be at most 38" in e.explain()


def test_invalid_side_error():
    e = InvalidSideError("X")
    assert e.side == "X"
    assert str(e) == "Boundary side must be 'L' or 'R', not 'X'."


def test_index_out_of_range_error():
    e = IndexOutOfRangeError(-1, 4)
    assert e.k == -1
    assert e.van_moment == 4
    assert str(e) == "Boundary scaling function index -1 is out of range."
    assert "members 0 to 3" in " ".join(e.explain().split())


def test_invalid_filter_error():
    e = InvalidFilterError("Tables are broken.", "row 1 too short", "row 2 too long")
    assert e.message == "Tables are broken."
    assert e.details == ("row 1 too short", "row 2 too long")
    assert str(e) == "Tables are broken."
    assert e.explain() == (
        "Tables are broken.\n\n* row 1 too short\n\n* row 2 too long"
    )


def test_base_explain_not_implemented():
    with pytest.raises(NotImplementedError):
        FilterError().explain()
