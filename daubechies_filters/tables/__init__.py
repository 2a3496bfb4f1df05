"""
:py:mod:`daubechies_filters.tables`: Coefficient tables
=======================================================

Constants, :py:class:`~enum.Enum` values and the tabulated scaling filter
coefficients from which all filters in this package are built.

The tables are populated once, when this module is first imported, and are
exposed only as read-only mappings of tuples. Importing this module also runs
:py:func:`check_table_consistency` so that a corrupted table is reported
immediately rather than when a filter is first requested.
"""

from daubechies_filters.tables.constants import (
    Side,
    FilterKinds,
    BOUNDARY_KINDS,
    OrderRange,
    TABULATED_ORDERS,
)

from daubechies_filters.tables.tables import (
    BOUNDARY_FILTERS_DOCUMENT,
    INTERIOR_FILTERS,
    LEFT_SCALING_FILTERS,
    RIGHT_SCALING_FILTERS,
)

from daubechies_filters.tables.lookup import (
    TABLES,
    is_tabulated,
    raw_coefficients,
    boundary_row_length,
    check_table_consistency,
)

__all__ = [
    "Side",
    "FilterKinds",
    "BOUNDARY_KINDS",
    "OrderRange",
    "TABULATED_ORDERS",
    "BOUNDARY_FILTERS_DOCUMENT",
    "INTERIOR_FILTERS",
    "LEFT_SCALING_FILTERS",
    "RIGHT_SCALING_FILTERS",
    "TABLES",
    "is_tabulated",
    "raw_coefficients",
    "boundary_row_length",
    "check_table_consistency",
]


check_table_consistency()
