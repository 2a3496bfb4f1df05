import pytest

from types import MappingProxyType

from daubechies_filters.exceptions import InvalidOrderError, InvalidFilterError

from daubechies_filters.tables import lookup

from daubechies_filters.tables import (
    FilterKinds,
    INTERIOR_FILTERS,
    LEFT_SCALING_FILTERS,
    RIGHT_SCALING_FILTERS,
    is_tabulated,
    raw_coefficients,
    boundary_row_length,
    check_table_consistency,
)


@pytest.mark.parametrize(
    "kind,order,expectation",
    [
        (FilterKinds.interior, 1, False),
        (FilterKinds.interior, 2, True),
        (FilterKinds.interior, 8, True),
        (FilterKinds.interior, 9, False),
        (FilterKinds.left_boundary, 1, False),
        (FilterKinds.left_boundary, 5, True),
        (FilterKinds.right_boundary, 8, True),
        (FilterKinds.right_boundary, 9, False),
        (FilterKinds.right_boundary, -3, False),
    ],
)
def test_is_tabulated(kind, order, expectation):
    assert is_tabulated(kind, order) is expectation


class TestRawCoefficients:
    def test_interior(self):
        assert raw_coefficients(FilterKinds.interior, 3) is INTERIOR_FILTERS[3]

    def test_boundary(self):
        assert raw_coefficients(FilterKinds.left_boundary, 3) is LEFT_SCALING_FILTERS[3]
        assert raw_coefficients(FilterKinds.right_boundary, 3) is RIGHT_SCALING_FILTERS[3]

    def test_kind_by_value(self):
        assert raw_coefficients("left boundary", 2) is LEFT_SCALING_FILTERS[2]

    @pytest.mark.parametrize("kind", list(FilterKinds))
    @pytest.mark.parametrize("order", [-1, 0, 1, 9, 100])
    def test_not_tabulated(self, kind, order):
        with pytest.raises(InvalidOrderError) as exc_info:
            raw_coefficients(kind, order)
        assert exc_info.value.order == order
        assert exc_info.value.minimum == 2
        assert exc_info.value.maximum == 8


@pytest.mark.parametrize(
    "order,k,expectation", [(2, 0, 3), (2, 1, 5), (3, 2, 8), (8, 7, 23)],
)
def test_boundary_row_length(order, k, expectation):
    assert boundary_row_length(order, k) == expectation


class TestCheckTableConsistency:
    def test_shipped_tables_are_consistent(self):
        # Must not raise
        check_table_consistency()

    @pytest.mark.parametrize("p", range(2, 9))
    def test_member_row_lengths(self, p):
        for table in (LEFT_SCALING_FILTERS, RIGHT_SCALING_FILTERS):
            assert len(table[p]) == p
            for k, row in enumerate(table[p]):
                assert len(row) == p + 2 * k + 1

    def test_bad_interior_row(self, monkeypatch):
        broken = dict(INTERIOR_FILTERS)
        broken[3] = broken[3][:-1]
        monkeypatch.setattr(lookup, "INTERIOR_FILTERS", MappingProxyType(broken))

        with pytest.raises(InvalidFilterError) as exc_info:
            check_table_consistency()
        assert exc_info.value.details == (
            "interior filter for p = 3 has 5 coefficients, expected 6",
        )

    def test_bad_boundary_rows(self, monkeypatch):
        broken = dict(RIGHT_SCALING_FILTERS)
        broken[2] = (broken[2][0], broken[2][1][:-1])
        broken[4] = broken[4][:-1]
        tables = dict(lookup.TABLES)
        tables[FilterKinds.right_boundary] = MappingProxyType(broken)
        monkeypatch.setattr(lookup, "TABLES", tables)

        with pytest.raises(InvalidFilterError) as exc_info:
            check_table_consistency()
        assert exc_info.value.details == (
            "right boundary filter for p = 2, k = 1 has 4 coefficients, expected 5",
            "right boundary filters for p = 4 have 3 members, expected 4",
        )
