r"""
The :py:mod:`daubechies_filters.string_formatters` module contains facilities
for formatting filter coefficients as strings.

When we say 'string formatter' we mean a function/callable which takes a value
and returns a string representation of that value. Instances of the classes in
this module act as formatters. For example, the :py:class:`Coefficient` class
may be used to format coefficients to a fixed number of significant digits::

    >>> from daubechies_filters.string_formatters import Coefficient

    >>> fmt = Coefficient(4)
    >>> fmt(0.482962913145)
    ' 4.830e-01'
    >>> fmt(-0.129409522551)
    '-1.294e-01'

"""

from daubechies_filters.string_utils import indent

__all__ = [
    "Coefficient",
    "List",
    "MultilineList",
    "IndexedList",
]


class Coefficient:
    """
    Formats real numbers in scientific notation with a leading space for
    positive values so that columns of coefficients line up.

    Parameters
    ==========
    num_digits : int
        The number of significant digits to show.
    """

    def __init__(self, num_digits=12):
        self.num_digits = num_digits

    def __call__(self, number):
        return "{: .{}e}".format(float(number), max(self.num_digits - 1, 0))


class List:
    """
    A formatter for lists which collapses repeated entries.

    Examples::

        >>> # Use Python-style notation for repeated entries
        >>> List()([0, 0, 0, 0])
        [0]*4

        >>> # Also displays lists with some non-repeated values
        >>> List()([1, 2, 3, 0, 0, 0, 0, 0, 4, 5])
        [1, 2, 3] + [0]*5 + [4, 5]

        >>> # A custom formatter may be supplied for formatting the list
        >>> # entries
        >>> List(formatter=Coefficient(2))([0.5, 0.0, 0.0, 0.0])
        [ 5.0e-01] + [ 0.0e+00]*3
    """

    def __init__(self, min_run_length=3, formatter=str):
        self.min_run_length = min_run_length
        self.formatter = formatter

    def __call__(self, lst):
        values = [self.formatter(v) for v in lst]
        if len(values) == 0:
            return "[]"

        # Group into (value, run_length) pairs
        runs = []
        for value in values:
            if runs and runs[-1][0] == value:
                runs[-1][1] += 1
            else:
                runs.append([value, 1])

        # Merge short runs into plain lists, keep long runs as (value, count)
        out = []
        for value, run_length in runs:
            if run_length >= self.min_run_length:
                out.append((value, run_length))
            else:
                if not out or not isinstance(out[-1], list):
                    out.append([])
                out[-1].extend([value] * run_length)

        return " + ".join(
            (
                "[{}]".format(", ".join(value_run))
                if isinstance(value_run, list)
                else "[{}]*{}".format(*value_run)
            )
            for value_run in out
        )


class MultilineList:
    """
    A formatter for lists which displays each value on its own line.

    Examples::

        >>> MultilineList()(["one", "two", "three"])
        0: one
        1: two
        2: three

        >>> # A heading may be added
        >>> MultilineList(heading="MyList")(["one", "two", "three"])
        MyList
          0: one
          1: two
          2: three
    """

    def __init__(self, heading=None, formatter=str):
        self.heading = heading
        self.formatter = formatter

    def labels(self, lst):
        return range(len(lst))

    def __call__(self, lst):
        lines = "\n".join(
            "{}: {}".format(label, self.formatter(value))
            for label, value in zip(self.labels(lst), lst)
        )

        if self.heading is None:
            return lines
        else:
            return "{}\n{}".format(self.heading, indent(lines))


class IndexedList(MultilineList):
    """
    Like :py:class:`MultilineList` but labels each value with the
    corresponding integer index from a support interval rather than its
    position in the list.

    Examples::

        >>> from daubechies_filters.support import SupportInterval
        >>> IndexedList(SupportInterval(-1, 1))(["a", "b", "c"])
        -1: a
         0: b
         1: c
    """

    def __init__(self, support, heading=None, formatter=str):
        super().__init__(heading, formatter)
        self.support = support

    def labels(self, lst):
        indices = [str(i) for i in self.support.indices()]
        width = max(len(i) for i in indices)
        return [i.rjust(width) for i in indices]
