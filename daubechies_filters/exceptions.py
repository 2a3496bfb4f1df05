"""
The exceptions defined in :py:mod:`daubechies_filters.exceptions` derive from
:py:exc:`FilterError` and are thrown when a filter cannot be constructed or
accessed as requested. These exceptions provide detailed explanations of the
failure via their :py:meth:`~FilterError.explain` method.

Each exception also derives from the closest built-in exception type so that
callers may catch (for example) :py:exc:`ValueError` or :py:exc:`IndexError`
without knowing about this module.

.. autoexception:: FilterError
    :members:

.. autoexception:: InvalidOrderError

.. autoexception:: InvalidSideError

.. autoexception:: IndexOutOfRangeError

.. autoexception:: InvalidFilterError

"""

from daubechies_filters.string_utils import wrap_paragraphs

__all__ = [
    "FilterError",
    "InvalidOrderError",
    "InvalidSideError",
    "IndexOutOfRangeError",
    "InvalidFilterError",
]


class FilterError(Exception):
    """
    Base class for all exceptions thrown by this package.
    """

    def __str__(self):
        return wrap_paragraphs(self.explain()).partition("\n")[0]

    def explain(self):
        """
        Produce a detailed human readable explanation of the failure.

        Should return a string which can be re-linewrapped by
        :py:func:`daubechies_filters.string_utils.wrap_paragraphs`.

        The first line will be used as a summary when the exception is printed
        using :py:func:`str`.
        """
        raise NotImplementedError()


class InvalidOrderError(FilterError, ValueError):
    """
    Thrown when the requested number of vanishing moments is outside the range
    supported for the requested kind of filter.

    Parameters
    ==========
    order : int
        The order requested.
    kind : str
        A short description of the filter kind (e.g. "interior").
    minimum, maximum : int or None
        The range of supported orders (inclusive). Either may be None when
        unbounded.
    """

    def __init__(self, order, kind, minimum=None, maximum=None):
        super().__init__(order, kind, minimum, maximum)
        self.order = order
        self.kind = kind
        self.minimum = minimum
        self.maximum = maximum

    def explain(self):
        order, kind, minimum, maximum = self.args

        if minimum is not None and maximum is not None:
            supported = "between {} and {} (inclusive)".format(minimum, maximum)
        elif minimum is not None:
            supported = "at least {}".format(minimum)
        else:
            supported = "at most {}".format(maximum)

        return """
            No {} filter is available with {!r} vanishing moments.

            The number of vanishing moments must be {}.
        """.format(kind, order, supported)


class InvalidSideError(FilterError, ValueError):
    """
    Thrown when a boundary filter is requested for a side which is neither
    left ("L") nor right ("R").
    """

    def __init__(self, side):
        super().__init__(side)
        self.side = side

    def explain(self):
        (side,) = self.args
        return """
            Boundary side must be 'L' or 'R', not {!r}.
        """.format(side)


class IndexOutOfRangeError(FilterError, IndexError):
    """
    Thrown when a boundary filter family member outside of ``0 <= k < p`` is
    requested.
    """

    def __init__(self, k, van_moment):
        super().__init__(k, van_moment)
        self.k = k
        self.van_moment = van_moment

    def explain(self):
        k, van_moment = self.args
        return """
            Boundary scaling function index {} is out of range.

            A boundary filter family with {} vanishing moments has members
            0 to {}.
        """.format(k, van_moment, van_moment - 1)


class InvalidFilterError(FilterError, AssertionError):
    """
    Thrown when an internal construction invariant or a data-integrity check
    on the coefficient tables fails. Should never occur in practice.
    """

    def __init__(self, message, *details):
        super().__init__(message, *details)
        self.message = message
        self.details = details

    def explain(self):
        return "\n\n".join(
            [self.message] + ["* {}".format(detail) for detail in self.details]
        )
