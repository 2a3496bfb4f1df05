import pytest

from math import sqrt

from daubechies_filters.tables import (
    Side,
    FilterKinds,
    BOUNDARY_KINDS,
    TABULATED_ORDERS,
    INTERIOR_FILTERS,
    LEFT_SCALING_FILTERS,
    RIGHT_SCALING_FILTERS,
)


def test_side_tags():
    assert Side("L") is Side.left
    assert Side("R") is Side.right
    assert len(Side) == 2


def test_boundary_kinds():
    assert BOUNDARY_KINDS[Side.left] is FilterKinds.left_boundary
    assert BOUNDARY_KINDS[Side.right] is FilterKinds.right_boundary


@pytest.mark.parametrize("kind", list(FilterKinds))
def test_tabulated_orders(kind):
    assert TABULATED_ORDERS[kind] == (2, 8)


@pytest.mark.parametrize(
    "table", [INTERIOR_FILTERS, LEFT_SCALING_FILTERS, RIGHT_SCALING_FILTERS],
)
def test_tables_cover_orders_2_to_8(table):
    assert sorted(table) == list(range(2, 9))


@pytest.mark.parametrize(
    "table", [INTERIOR_FILTERS, LEFT_SCALING_FILTERS, RIGHT_SCALING_FILTERS],
)
def test_tables_are_read_only(table):
    with pytest.raises(TypeError):
        table[9] = ()
    with pytest.raises(TypeError):
        del table[2]
    assert isinstance(table[2], tuple)


@pytest.mark.parametrize("p", range(2, 9))
def test_interior_filters_normalised(p):
    # Orthonormal scaling filters sum to sqrt(2) and have unit energy. The
    # tabulated values are only given to around 12 significant figures.
    h = INTERIOR_FILTERS[p]
    assert sum(h) == pytest.approx(sqrt(2), abs=1e-9)
    assert sum(c * c for c in h) == pytest.approx(1.0, abs=1e-9)


def test_interior_filter_values():
    assert INTERIOR_FILTERS[2] == (
        0.482962913145, 0.836516303738, 0.224143868042, -0.129409522551,
    )
    assert INTERIOR_FILTERS[4][0] == 0.045570345896 / sqrt(2)


@pytest.mark.parametrize("table", [LEFT_SCALING_FILTERS, RIGHT_SCALING_FILTERS])
def test_boundary_rows_are_tuples(table):
    for rows in table.values():
        assert all(isinstance(row, tuple) for row in rows)


def test_boundary_filter_values():
    assert LEFT_SCALING_FILTERS[2][0] == (0.6033325119, 0.6908955318, -0.3983129977)
    assert RIGHT_SCALING_FILTERS[2][0] == (0.8705087534, 0.4348969980, 0.2303890438)
    assert LEFT_SCALING_FILTERS[8][7][-1] == -0.3382203026E-02
    assert RIGHT_SCALING_FILTERS[8][7][-1] == 0.1889928755E-02
