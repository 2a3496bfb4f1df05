"""
:py:mod:`daubechies_filters.metadata` Data provenance metadata
==============================================================

The coefficient tables in this package are copied from published sources
rather than computed. This module is used to record where each tabulated value
came from so that the tables can be checked against (and cited back to) their
original publication.

Constants may be cross-referenced against their source using
:py:func:`ref_value`. This takes the value being referenced along with the
section of the source document as minimal arguments. For example::

    >>> from daubechies_filters.metadata import ref_value

    >>> SYMMLET_2 = ref_value([0.48296, 0.83652, 0.22414, -0.12941], "Table 6.3")

:py:func:`ref_value` returns the argument passed to it unchanged but
automatically logs the name it was assigned to and the file and line number it
was assigned on.


Accessing the metadata
----------------------

After all submodules of :py:mod:`daubechies_filters` have been loaded, the
:py:data:`referenced_values` list will be populated with
:py:class:`ReferencedValue` instances for everything annotated in the source.

Human-readable citations for :py:class:`ReferencedValue` instances can be
obtained from :py:func:`format_citation`. The :py:func:`lookup_by_value` and
:py:func:`lookup_by_name` convenience functions may be used to search the list.

API
---

.. autoclass:: ReferencedValue

.. autodata:: referenced_values
    :annotation: = [...]

.. autodata:: DEFAULT_DOCUMENT

.. autofunction:: ref_value

.. autofunction:: lookup_by_value

.. autofunction:: lookup_by_name

.. autofunction:: format_citation
"""

import re
import sys
import inspect

from collections import namedtuple

__all__ = [
    "DEFAULT_DOCUMENT",
    "ReferencedValue",
    "referenced_values",
    "ref_value",
    "lookup_by_value",
    "lookup_by_name",
    "format_citation",
]


DEFAULT_DOCUMENT = "Daubechies, Ten Lectures on Wavelets (1992)"
"""
If not otherwise specified, the document section numbers refer to.
"""


ReferencedValue = namedtuple(
    "ReferencedValue", "value,section,document,name,filename,lineno",
)
"""
A value in this codebase, referenced back to a source document.

Parameters
==========
value : any
    The Python value to be referenced.
section : str
    A document reference (e.g. "Table 6.3").
document : str
    The name (or URL) of the document being referenced. Defaults to
    :py:data:`DEFAULT_DOCUMENT`.
name : str or None
    A meaningful identifier for this value.
filename : str or None
    The filename of the Python source file where the value was referenced.
lineno : int or None
    The line number at which the value was referenced.
"""


referenced_values = []
r"""
The complete set of :py:class:`ReferencedValue`\ s in this code base, in no
particular order.
"""

# The filename of this module (not its .pyc file)
_metadata_module_filename = inspect.getsourcefile(sys.modules[__name__])


def _find_call_site():
    """
    Return the (filename, lineno, code) of the closest stack frame outside of
    this module.
    """
    for frame_info in inspect.stack():
        if frame_info.filename != _metadata_module_filename:
            code = "\n".join(frame_info.code_context or [])
            return (frame_info.filename, frame_info.lineno, code)
    return (None, None, "")


def ref_value(value, section, document=None, name="auto"):
    """
    Record the fact that the provided Python value is referenced back to the
    specified document.

    Appends a :py:class:`ReferencedValue` to :py:data:`referenced_values`,
    automatically filling in the document, filename and line number.

    Parameters
    ==========
    value : any
    section : str
        The part of the document the value is taken from.
    document : str or None
        Defaults to :py:data:`DEFAULT_DOCUMENT` if None.
    name : str, None or "auto"
        If "auto", uses the ``__name__`` attribute of the value. If no
        ``__name__`` attribute is present, falls back on whatever appears
        before the "=" on the line of code where ``ref_value`` was called.

    Returns
    =======
    Returns the 'value' argument (untouched).
    """
    if document is None:
        document = DEFAULT_DOCUMENT

    filename, lineno, code = _find_call_site()

    if name == "auto":
        name = getattr(value, "__name__", None)
        if name is None:
            # Crudely extract the name being assigned to at the call site
            match = re.match(
                r"\s*([^\s]+)\s*=\s*((daubechies_filters\.)?metadata\.)?ref_value",
                code,
            )
            if match:
                name = match.group(1)

    referenced_values.append(
        ReferencedValue(
            value=value,
            section=section,
            document=document,
            name=name,
            filename=filename,
            lineno=lineno,
        )
    )

    return value


def lookup_by_value(value):
    """
    Search :py:data:`referenced_values` for entries whose values are the value
    given. If no or multiple matching entries exist, a :py:exc:`ValueError` is
    thrown.
    """
    results = [e for e in referenced_values if e.value is value]
    if len(results) != 1:
        raise ValueError(value)
    else:
        return results[0]


def lookup_by_name(name, filename=None):
    """
    Search :py:data:`referenced_values` for entries whose names (and optionally
    filename) match the provided value.
    """
    results = [
        e
        for e in referenced_values
        if e.name == name and (filename is None or e.filename == filename)
    ]
    if len(results) != 1:
        raise ValueError(name)
    else:
        return results[0]


def format_citation(referenced_value):
    """
    Produce a human-readable citation string for the specified
    :py:class:`ReferencedValue`.
    """
    return "{} ({}{})".format(
        (referenced_value.name if referenced_value.name is not None else ""),
        (
            "{}: ".format(referenced_value.document)
            if referenced_value.document != DEFAULT_DOCUMENT
            else ""
        ),
        referenced_value.section,
    ).strip()
