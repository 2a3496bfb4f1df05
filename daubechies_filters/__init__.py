"""
The :py:mod:`daubechies_filters` module provides the scaling filter
coefficients needed to build Daubechies wavelet transforms on a bounded
interval, for example when solving PDEs or analysing finite-length signals.

Below we give a general overview of the design of the package.


Main components
---------------

Two kinds of filter are provided:

* Interior filters (:py:mod:`daubechies_filters.interior`): the
  translation-invariant filter used away from the edges of the interval. One
  filter exists per number of vanishing moments ``p``.
* Boundary filters (:py:mod:`daubechies_filters.boundary`): a *family* of
  ``p`` filters for each side of the interval, one per boundary scaling
  function needed to preserve the approximation order near that edge.

A consumer typically holds one interior filter along with a left and a right
boundary filter family of the same order::

    >>> from daubechies_filters import ifilter, bfilter
    >>> h = ifilter(4)
    >>> left = bfilter(4, "L")
    >>> right = bfilter(4, "R")


Indexing conventions
--------------------

Filters are indexed by integers over a
:py:class:`~daubechies_filters.support.SupportInterval`. Interior filters
behave as infinite sequences which are zero outside of their support, so
``h[i]`` never fails for an integer ``i``. Boundary filter members are
indexed by ``k = 0, ..., p - 1`` and requesting any other member is an error
(see :py:mod:`daubechies_filters.exceptions`).


Coefficient data
----------------

All coefficients come from published tables held in
:py:mod:`daubechies_filters.tables`, with the exception of standard (non
symmlet) interior filters which are obtained from PyWavelets. The tables are
read-only and are checked for internal consistency when first imported.
"""

from daubechies_filters.version import __version__

from daubechies_filters.exceptions import (
    FilterError,
    InvalidOrderError,
    InvalidSideError,
    IndexOutOfRangeError,
    InvalidFilterError,
)

from daubechies_filters.support import SupportInterval

from daubechies_filters.tables import Side

from daubechies_filters.interior import InteriorFilter, ifilter

from daubechies_filters.boundary import BoundaryFilter, bfilter

__all__ = [
    "__version__",
    "FilterError",
    "InvalidOrderError",
    "InvalidSideError",
    "IndexOutOfRangeError",
    "InvalidFilterError",
    "SupportInterval",
    "Side",
    "InteriorFilter",
    "ifilter",
    "BoundaryFilter",
    "bfilter",
]
