"""
Table lookup
============

Routines for retrieving rows from the coefficient tables and for checking that
the tables are internally consistent.

.. currentmodule:: daubechies_filters.tables
"""

import logging

from daubechies_filters.exceptions import InvalidOrderError, InvalidFilterError

from daubechies_filters.tables.constants import FilterKinds, TABULATED_ORDERS

from daubechies_filters.tables.tables import (
    INTERIOR_FILTERS,
    LEFT_SCALING_FILTERS,
    RIGHT_SCALING_FILTERS,
)

__all__ = [
    "TABLES",
    "is_tabulated",
    "raw_coefficients",
    "boundary_row_length",
    "check_table_consistency",
]


TABLES = {
    FilterKinds.interior: INTERIOR_FILTERS,
    FilterKinds.left_boundary: LEFT_SCALING_FILTERS,
    FilterKinds.right_boundary: RIGHT_SCALING_FILTERS,
}
"""Lookup from :py:class:`FilterKinds` to the corresponding table."""


def is_tabulated(kind, order):
    """
    Return True if the table for the given :py:class:`FilterKinds` contains an
    entry for the given number of vanishing moments.
    """
    minimum, maximum = TABULATED_ORDERS[kind]
    return minimum <= order <= maximum and order in TABLES[kind]


def raw_coefficients(kind, order):
    """
    Look up the raw tabulated coefficients for a filter.

    Parameters
    ==========
    kind : :py:class:`FilterKinds`
    order : int
        The number of vanishing moments.

    Returns
    =======
    coefficients : (float, ...) or ((float, ...), ...)
        For :py:attr:`FilterKinds.interior`, a tuple of ``2 * order``
        coefficients. For the boundary kinds, a tuple of ``order`` rows.

    Raises
    ======
    :py:exc:`~daubechies_filters.exceptions.InvalidOrderError`
        If no coefficients are tabulated for this order.
    """
    kind = FilterKinds(kind)
    if not is_tabulated(kind, order):
        minimum, maximum = TABULATED_ORDERS[kind]
        raise InvalidOrderError(order, kind.value, minimum, maximum)
    return TABLES[kind][order]


def boundary_row_length(order, k):
    """
    The number of coefficients in the refinement filter of the ``k``-th
    boundary scaling function with ``order`` vanishing moments.

    The ``k``-th function is supported on ``[0, order + k]`` and so refines
    into the ``order`` boundary functions plus interior translates up to
    ``order + 2k`` at the next finer scale.
    """
    return order + 2 * k + 1


def check_table_consistency():
    """
    Check that every row of every table has the length implied by its order
    and position.

    Raises
    ======
    :py:exc:`~daubechies_filters.exceptions.InvalidFilterError`
        Listing every inconsistent entry found.
    """
    problems = []

    for order, coefficients in INTERIOR_FILTERS.items():
        if len(coefficients) != 2 * order:
            problems.append(
                "interior filter for p = {} has {} coefficients, expected {}".format(
                    order, len(coefficients), 2 * order,
                )
            )

    for kind in (FilterKinds.left_boundary, FilterKinds.right_boundary):
        for order, rows in TABLES[kind].items():
            if len(rows) != order:
                problems.append(
                    "{} filters for p = {} have {} members, expected {}".format(
                        kind.value, order, len(rows), order,
                    )
                )
            for k, row in enumerate(rows):
                expected = boundary_row_length(order, k)
                if len(row) != expected:
                    problems.append(
                        "{} filter for p = {}, k = {} has {} coefficients, "
                        "expected {}".format(
                            kind.value, order, k, len(row), expected,
                        )
                    )

    if problems:
        raise InvalidFilterError("Coefficient tables are inconsistent.", *problems)

    logging.debug("check_table_consistency: all coefficient tables consistent")
