"""
Boundary filters
================

Near an edge of a bounded interval the interior scaling functions are replaced
by ``p`` boundary scaling functions (for ``p`` vanishing moments) to preserve
the approximation order. A :py:class:`BoundaryFilter` holds the refinement
filters of all ``p`` boundary scaling functions for one side::

    >>> from daubechies_filters.boundary import bfilter
    >>> B = bfilter(2, "L")
    >>> B.support
    SupportInterval(left=0, right=3)
    >>> B.member_support(0), B.member_support(1)
    (SupportInterval(left=0, right=2), SupportInterval(left=0, right=3))
    >>> list(B.integers())
    [3, 2, 1]

The ``k``-th boundary scaling function is supported on ``[0, p + k]`` at the
left edge and on ``[-(p + k), 0]`` at the right edge. Its refinement filter,
returned by :py:meth:`BoundaryFilter.member`, has ``p + 2k + 1``
coefficients: ``p`` relating it to the boundary scaling functions at the next
finer scale, followed by ``2k + 1`` relating it to the interior scaling
functions translated by ``p, ..., p + 2k``.

Boundary filters are only tabulated for ``2 <= p <= 8``.

.. autofunction:: bfilter

.. autoclass:: BoundaryFilter
    :members:

.. autofunction:: to_side
"""

import logging

import numpy as np

from daubechies_filters.exceptions import (
    InvalidOrderError,
    InvalidSideError,
    IndexOutOfRangeError,
    InvalidFilterError,
)

from daubechies_filters.support import SupportInterval

from daubechies_filters.string_formatters import Coefficient, List

from daubechies_filters.string_utils import indent

from daubechies_filters.tables import (
    Side,
    BOUNDARY_KINDS,
    TABULATED_ORDERS,
    is_tabulated,
    raw_coefficients,
)

__all__ = [
    "BoundaryFilter",
    "bfilter",
    "to_side",
    "family_support",
]


def to_side(side):
    """
    Convert a :py:class:`~daubechies_filters.tables.Side` or a side tag
    (``"L"`` or ``"R"``) into a :py:class:`~daubechies_filters.tables.Side`.

    Raises
    ======
    :py:exc:`~daubechies_filters.exceptions.InvalidSideError`
    """
    if isinstance(side, Side):
        return side
    try:
        return Side(side)
    except (ValueError, TypeError):
        raise InvalidSideError(side)


def family_support(side, p):
    """
    The union of the supports of all ``p`` boundary scaling functions on the
    given side.
    """
    if side is Side.left:
        return SupportInterval(0, 2 * p - 1)
    elif side is Side.right:
        return SupportInterval(-2 * p + 1, 0)


class BoundaryFilter:
    """
    The family of refinement filters for the ``p`` boundary scaling functions
    at one edge of an interval.

    Usually constructed using :py:func:`bfilter`.

    Parameters
    ==========
    side : :py:class:`~daubechies_filters.tables.Side`
    van_moment : int
        The number of vanishing moments, ``2 <= van_moment <= 8``.
    support : :py:class:`~daubechies_filters.support.SupportInterval`
        The union of the supports of the boundary scaling functions.
    filters : [[float, ...], ...]
        One coefficient sequence per boundary scaling function.

    Raises
    ======
    :py:exc:`~daubechies_filters.exceptions.InvalidFilterError`
        If the side or number of vanishing moments is invalid or the number of
        filters does not match the number of vanishing moments.
    """

    def __init__(self, side, van_moment, support, filters):
        if (
            not isinstance(side, Side)
            or not is_tabulated(BOUNDARY_KINDS[side], van_moment)
        ):
            raise InvalidFilterError(
                "Not a valid boundary filter.",
                "side = {!r}, van_moment = {!r}".format(side, van_moment),
            )
        if len(filters) != van_moment:
            raise InvalidFilterError(
                "Not a valid boundary filter.",
                "{} filters given for {} vanishing moments".format(
                    len(filters), van_moment,
                ),
            )

        frozen = []
        for row in filters:
            row = np.array(row, dtype=float)
            row.setflags(write=False)
            frozen.append(row)

        self._side = side
        self._van_moment = van_moment
        self._support = support
        self._filters = tuple(frozen)

    @property
    def side(self):
        """The :py:class:`~daubechies_filters.tables.Side` of the interval."""
        return self._side

    @property
    def van_moment(self):
        """The number of vanishing moments."""
        return self._van_moment

    @property
    def support(self):
        """
        The union of the supports of the boundary scaling functions: ``[0, 2p
        - 1]`` on the left, ``[-2p + 1, 0]`` on the right.
        """
        return self._support

    @property
    def left(self):
        return self._support.left

    @property
    def right(self):
        return self._support.right

    def __len__(self):
        """The number of boundary scaling functions (i.e. ``van_moment``)."""
        return self._van_moment

    def _check_index(self, k):
        if not 0 <= k < self._van_moment:
            raise IndexOutOfRangeError(k, self._van_moment)

    def member(self, k):
        """
        Return a (writable) copy of the refinement filter coefficients of the
        ``k``-th boundary scaling function, ``0 <= k < van_moment``.

        Raises
        ======
        :py:exc:`~daubechies_filters.exceptions.IndexOutOfRangeError`
        """
        self._check_index(k)
        return self._filters[k].copy()

    def member_support(self, k):
        """
        Return the support of the ``k``-th boundary scaling function:
        ``[0, p + k]`` on the left, ``[-(p + k), 0]`` on the right.

        Raises
        ======
        :py:exc:`~daubechies_filters.exceptions.IndexOutOfRangeError`
        """
        self._check_index(k)
        vm = self._van_moment
        if self._side is Side.left:
            return SupportInterval(0, vm + k)
        elif self._side is Side.right:
            return SupportInterval(-vm - k, 0)

    def __iter__(self):
        """Iterate over copies of each member's coefficients, in order of k."""
        return (self.member(k) for k in range(self._van_moment))

    def integers(self):
        """
        The non-zero integers in the support of the boundary scaling
        functions.

        On the left these run from ``right(support)`` down to ``1``; on the
        right from ``left(support)`` up to ``-1``. In both cases the boundary
        point ``0`` is excluded.
        """
        if self._side is Side.left:
            return range(self._support.right, 0, -1)
        elif self._side is Side.right:
            return range(self._support.left, 0, 1)

    def __eq__(self, other):
        if not isinstance(other, BoundaryFilter):
            return NotImplemented
        return (
            self._side is other._side
            and self._van_moment == other._van_moment
            and self._support == other._support
            and all(
                np.array_equal(a, b) for a, b in zip(self._filters, other._filters)
            )
        )

    def __hash__(self):
        return hash((
            self._side,
            self._van_moment,
            self._support,
            tuple(f.tobytes() for f in self._filters),
        ))

    def __repr__(self):
        return "<{} side={} van_moment={} support={}>".format(
            type(self).__name__, self._side.value, self._van_moment, self._support,
        )

    def __str__(self):
        formatter = List(formatter=Coefficient())
        return "Filters for {} Daubechies {} scaling function on {}:\n{}".format(
            self._side.name,
            self._van_moment,
            self._support,
            indent("\n".join(
                "k = {}: {}".format(k, formatter(f))
                for k, f in enumerate(self._filters)
            )),
        )


def bfilter(p, side):
    """
    Return the boundary filters for the scaling functions with ``p``
    vanishing moments.

    Parameters
    ==========
    p : int
        The number of vanishing moments, ``2 <= p <= 8``.
    side : :py:class:`~daubechies_filters.tables.Side` or str
        Either a :py:class:`~daubechies_filters.tables.Side` or one of the tags
        ``"L"`` and ``"R"``.

    Returns
    =======
    :py:class:`BoundaryFilter`

    Raises
    ======
    :py:exc:`~daubechies_filters.exceptions.InvalidSideError`
    :py:exc:`~daubechies_filters.exceptions.InvalidOrderError`
    """
    side = to_side(side)
    kind = BOUNDARY_KINDS[side]

    if not is_tabulated(kind, p):
        minimum, maximum = TABULATED_ORDERS[kind]
        raise InvalidOrderError(p, "{} boundary".format(side.name), minimum, maximum)

    logging.debug("bfilter: %s boundary filters for p = %d", side.name, p)

    return BoundaryFilter(side, p, family_support(side, p), raw_coefficients(kind, p))
