"""
``daubechies-filter-viewer``
============================

A command-line utility which displays the interior or boundary scaling filter
coefficients for a given number of vanishing moments.

Usage examples::

    $ daubechies-filter-viewer interior 4
    $ daubechies-filter-viewer interior 4 --standard
    $ daubechies-filter-viewer boundary 3 --side R
    $ daubechies-filter-viewer boundary 3 --side L --member 2

"""

import sys

import logging

from argparse import ArgumentParser

from daubechies_filters.version import __version__

from daubechies_filters.exceptions import FilterError

from daubechies_filters.string_utils import indent, wrap_paragraphs

from daubechies_filters.string_formatters import Coefficient, IndexedList

from daubechies_filters.interior import ifilter

from daubechies_filters.boundary import bfilter

from daubechies_filters.tables import Side, FilterKinds, is_tabulated


def parse_args(*args, **kwargs):
    parser = ArgumentParser(
        description="""
            Display Daubechies scaling filter coefficients.
        """
    )

    parser.add_argument(
        "--version", action="version", version="%(prog)s {}".format(__version__),
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="count",
        default=0,
        help="""
            Show additional status information during execution.
        """,
    )

    parser.add_argument(
        "--digits",
        "-d",
        type=int,
        default=12,
        metavar="N",
        help="""
            The number of significant digits to display for each coefficient.
            (Default: %(default)s.)
        """,
    )

    parser.add_argument(
        "kind",
        choices=["interior", "boundary"],
        help="""
            The kind of filter to display.
        """,
    )

    parser.add_argument(
        "p",
        type=int,
        help="""
            The number of vanishing moments.
        """,
    )

    interior_group = parser.add_argument_group("interior filter options")

    interior_group.add_argument(
        "--standard",
        "-s",
        action="store_true",
        default=False,
        help="""
            Show the standard Daubechies filter rather than the symmlet filter.
        """,
    )

    boundary_group = parser.add_argument_group("boundary filter options")

    boundary_group.add_argument(
        "--side",
        choices=[side.value for side in Side],
        default=Side.left.value,
        help="""
            The side of the interval (L or R). (Default: %(default)s.)
        """,
    )

    boundary_group.add_argument(
        "--member",
        "-k",
        type=int,
        metavar="K",
        help="""
            Show only the filter for the K-th boundary scaling function.
        """,
    )

    args = parser.parse_args(*args, **kwargs)

    if args.digits < 1:
        parser.error("--digits must be at least 1")
    if args.kind == "interior" and args.member is not None:
        parser.error("--member only applies to boundary filters")
    if args.kind == "boundary" and args.standard:
        parser.error("--standard only applies to interior filters")

    return args


def format_interior(p, symmlet, formatter):
    h = ifilter(p, symmlet)
    if symmlet and is_tabulated(FilterKinds.interior, p):
        variant = "symmlet"
    else:
        variant = "standard"
    return IndexedList(
        h.support,
        heading="Interior filter for Daubechies {} ({}) on {}:".format(
            p, variant, h.support,
        ),
        formatter=formatter,
    )(h.coef())


def format_boundary(p, side, member, formatter):
    B = bfilter(p, side)
    if member is None:
        members = range(len(B))
    else:
        members = [member]

    out = []
    for k in members:
        coefficients = B.member(k)
        out.append(
            "k = {} (scaling function supported on {}):\n{}".format(
                k,
                B.member_support(k),
                indent("\n".join(
                    "{}: {}".format(i, formatter(c))
                    for i, c in enumerate(coefficients)
                )),
            )
        )

    return "{} boundary filters for Daubechies {} on {}:\n{}".format(
        B.side.name.capitalize(), p, B.support, indent("\n\n".join(out)),
    )


def main(*args, **kwargs):
    args = parse_args(*args, **kwargs)

    log_level = logging.WARNING
    if args.verbose >= 2:
        log_level = logging.DEBUG
    elif args.verbose >= 1:
        log_level = logging.INFO
    logging.basicConfig(level=log_level)

    formatter = Coefficient(args.digits)

    try:
        if args.kind == "interior":
            logging.info("Looking up interior filter for p = %d", args.p)
            print(format_interior(args.p, not args.standard, formatter))
        else:
            logging.info(
                "Looking up %s boundary filters for p = %d", args.side, args.p,
            )
            print(format_boundary(args.p, args.side, args.member, formatter))
    except FilterError as e:
        sys.stderr.write("error: {}\n".format(wrap_paragraphs(e.explain(), 78)))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
