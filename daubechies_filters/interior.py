"""
Interior filters
================

The translation-invariant scaling filter used away from the boundaries of an
interval. An :py:class:`InteriorFilter` behaves like an infinite sequence which
is zero outside of its (compact) support::

    >>> from daubechies_filters.interior import ifilter
    >>> h = ifilter(2)
    >>> h.support
    SupportInterval(left=-1, right=2)
    >>> h[-1]
    0.482962913145
    >>> h[100]
    0.0

Two variants are available for each number of vanishing moments ``p``:

* The symmlet (least asymmetric) variant, supported on ``[-p + 1, p]``. This
  is tabulated for ``2 <= p <= 8`` and is the default where available.
* The standard Daubechies variant, supported on ``[0, 2p - 1]``. This is
  obtained from `PyWavelets <https://pywavelets.readthedocs.io/>`_ and is used
  for all other orders or when requested explicitly.

.. autofunction:: ifilter

.. autoclass:: InteriorFilter
    :members:

.. autofunction:: daubechies_scaling_filter
"""

import logging

import operator

import numpy as np

import pywt

from daubechies_filters.exceptions import InvalidOrderError, InvalidFilterError

from daubechies_filters.support import SupportInterval

from daubechies_filters.string_formatters import Coefficient, IndexedList

from daubechies_filters.tables import FilterKinds, is_tabulated, raw_coefficients

__all__ = [
    "MAX_DAUBECHIES_ORDER",
    "InteriorFilter",
    "ifilter",
    "daubechies_scaling_filter",
]


MAX_DAUBECHIES_ORDER = max(
    int(name[len("db"):]) for name in pywt.wavelist(family="db")
)
"""
The largest number of vanishing moments for which PyWavelets can provide a
standard Daubechies scaling filter.
"""


def daubechies_scaling_filter(p):
    """
    Return the ``2p`` coefficients of the standard Daubechies scaling
    (low-pass synthesis) filter with ``p`` vanishing moments, in ascending
    index order starting at index 0. Normalised to sum to ``sqrt(2)``.

    Raises
    ======
    :py:exc:`~daubechies_filters.exceptions.InvalidOrderError`
        If ``p`` is outside the range PyWavelets provides.
    """
    if not 1 <= p <= MAX_DAUBECHIES_ORDER:
        raise InvalidOrderError(p, "standard Daubechies interior", 1, MAX_DAUBECHIES_ORDER)
    return pywt.Wavelet("db{}".format(p)).rec_lo


class InteriorFilter:
    """
    An interior scaling filter with a given number of vanishing moments.

    Usually constructed using :py:func:`ifilter`.

    Parameters
    ==========
    van_moment : int
        The number of vanishing moments.
    coefficients : [float, ...]
        The filter coefficients in ascending index order.
    support : :py:class:`~daubechies_filters.support.SupportInterval`
        The indices of the first and last coefficient.

    Raises
    ======
    :py:exc:`~daubechies_filters.exceptions.InvalidFilterError`
        If ``van_moment`` is negative or the number of coefficients does not
        match the length of the support.
    """

    def __init__(self, van_moment, coefficients, support):
        if van_moment < 0:
            raise InvalidFilterError(
                "Not a valid interior filter.",
                "van_moment = {} is negative".format(van_moment),
            )

        coefficients = np.array(coefficients, dtype=float)
        if coefficients.ndim != 1 or len(coefficients) != support.length:
            raise InvalidFilterError(
                "Not a valid interior filter.",
                "{} coefficients given for support {} of length {}".format(
                    coefficients.size, support, support.length,
                ),
            )
        coefficients.setflags(write=False)

        self._van_moment = van_moment
        self._support = support
        self._filter = coefficients

    @property
    def van_moment(self):
        """The number of vanishing moments."""
        return self._van_moment

    @property
    def support(self):
        """
        The :py:class:`~daubechies_filters.support.SupportInterval` outside of
        which all coefficients are zero.
        """
        return self._support

    @property
    def left(self):
        return self._support.left

    @property
    def right(self):
        return self._support.right

    def __len__(self):
        return self._support.length

    def __getitem__(self, idx):
        """
        Return the coefficient at integer index ``idx``, or 0.0 if ``idx`` lies
        outside the support.
        """
        idx = operator.index(idx)
        if idx in self._support:
            return float(self._filter[idx - self._support.left])
        else:
            return 0.0

    def coef(self):
        """
        Return a (writable) copy of the coefficients as a :py:class:`numpy.ndarray`
        in ascending index order. Modifying the copy does not affect this
        filter.
        """
        return self._filter.copy()

    def __eq__(self, other):
        if not isinstance(other, InteriorFilter):
            return NotImplemented
        return (
            self._van_moment == other._van_moment
            and self._support == other._support
            and np.array_equal(self._filter, other._filter)
        )

    def __hash__(self):
        return hash((self._van_moment, self._support, self._filter.tobytes()))

    def __repr__(self):
        return "<{} van_moment={} support={}>".format(
            type(self).__name__, self._van_moment, self._support,
        )

    def __str__(self):
        return IndexedList(
            self._support,
            heading="Filter for Daubechies {} scaling function on {}:".format(
                self._van_moment, self._support,
            ),
            formatter=Coefficient(),
        )(self._filter)


def ifilter(p, symmlet=True):
    """
    Return the interior Daubechies filter with ``p`` vanishing moments.

    Parameters
    ==========
    p : int
        The number of vanishing moments (at least 1).
    symmlet : bool
        If True (the default), the tabulated symmlet filter is returned when
        one exists for ``p`` (i.e. for ``2 <= p <= 8``). Otherwise, or if
        False, the standard Daubechies filter is returned.

    Returns
    =======
    :py:class:`InteriorFilter`

    Raises
    ======
    :py:exc:`~daubechies_filters.exceptions.InvalidOrderError`
        If ``p < 1`` or no standard filter is available for ``p``.
    """
    if p < 1:
        raise InvalidOrderError(p, "interior", 1)

    if symmlet and is_tabulated(FilterKinds.interior, p):
        logging.debug("ifilter: using tabulated symmlet filter for p = %d", p)
        coefficients = raw_coefficients(FilterKinds.interior, p)
        support = SupportInterval(-p + 1, p)
    else:
        logging.debug("ifilter: using standard Daubechies filter for p = %d", p)
        coefficients = daubechies_scaling_filter(p)
        support = SupportInterval(0, 2 * p - 1)

    return InteriorFilter(p, coefficients, support)
