"""
Integer support intervals for filters.

A filter's coefficients are defined over all integers but are only (possibly)
non-zero on a closed, finite range of integers: its support. A
:py:class:`SupportInterval` describes such a range::

    >>> from daubechies_filters.support import SupportInterval
    >>> s = SupportInterval(-3, 4)
    >>> s.length
    8
    >>> 0 in s, 5 in s
    (True, False)
    >>> list(s.indices())
    [-3, -2, -1, 0, 1, 2, 3, 4]
"""

from collections import namedtuple

__all__ = [
    "SupportInterval",
]


class SupportInterval(namedtuple("SupportInterval", "left,right")):
    """
    A closed integer interval ``[left, right]`` with ``left <= right``.

    Parameters
    ==========
    left : int
        The first index in the interval.
    right : int
        The last index in the interval (inclusive).
    """

    __slots__ = ()

    def __new__(cls, left, right):
        left = int(left)
        right = int(right)
        if left > right:
            raise ValueError(
                "Support interval must have left <= right, got [{}, {}].".format(
                    left, right
                )
            )
        return super().__new__(cls, left, right)

    @property
    def length(self):
        """The number of integers in the interval."""
        return self.right - self.left + 1

    def __contains__(self, index):
        return self.left <= index <= self.right

    def indices(self):
        """
        Return a :py:class:`range` over every integer in the interval, in
        ascending order.
        """
        return range(self.left, self.right + 1)

    def issubset(self, other):
        """
        Test whether this interval lies entirely within 'other'.
        """
        return other.left <= self.left and self.right <= other.right

    def __str__(self):
        return "[{}, {}]".format(self.left, self.right)
