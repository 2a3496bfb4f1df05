"""
Constants
=========

.. currentmodule:: daubechies_filters.tables
"""

from enum import Enum

from collections import namedtuple

__all__ = [
    "Side",
    "FilterKinds",
    "BOUNDARY_KINDS",
    "OrderRange",
    "TABULATED_ORDERS",
]


class Side(Enum):
    """
    The edge of a bounded interval next to which a boundary filter applies.
    Values are the single-character tags conventionally used for each side.
    """

    left = "L"
    right = "R"


class FilterKinds(Enum):
    """The kinds of coefficient table held by this package."""

    interior = "interior"
    left_boundary = "left boundary"
    right_boundary = "right boundary"


BOUNDARY_KINDS = {
    Side.left: FilterKinds.left_boundary,
    Side.right: FilterKinds.right_boundary,
}
"""Lookup from :py:class:`Side` to the :py:class:`FilterKinds` of its table."""


OrderRange = namedtuple("OrderRange", "minimum,maximum")
"""
An inclusive range of vanishing-moment orders.

Parameters
----------
minimum
    The smallest supported order.
maximum
    The largest supported order.
"""


TABULATED_ORDERS = {
    FilterKinds.interior: OrderRange(2, 8),
    FilterKinds.left_boundary: OrderRange(2, 8),
    FilterKinds.right_boundary: OrderRange(2, 8),
}
"""
The range of vanishing-moment orders for which each kind of filter is
tabulated.
"""
