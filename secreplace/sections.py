"""
# Section Replace: sections.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Location and replacement of marker-delimited sections.

A section is the text running from an opening marker to a closing marker, markers included.
Sections may be nested, and the innermost section is always dealt with first:
the first closing marker (scanning left to right) is paired with
the right-most opening marker preceding it.

Errors are returned in the result (field `error`) rather than raised.
The field `kind` tells where an error came from:
anything raised by the transformer is `ErrorKind.TRANSFORMER_FAILURE`,
whatever the class of the exception.
"""

from typing import Callable, NamedTuple, Optional

from secreplace.exceptions import (
    EmptyClosingMarkerException,
    EmptyOpeningMarkerException,
    ErrorKind,
    MissingTransformerException,
    SectionReplaceException,
    UnmatchedClosingMarkerException,
    UnmatchedOpeningMarkerException,
)

Transformer = Callable[[str], str]


class LocateResult(NamedTuple):
    start: int
    end: int
    found: bool
    error: Optional[Exception] = None
    kind: Optional[ErrorKind] = None

    def raise_error(self) -> 'LocateResult':
        if self.error is not None:
            raise self.error

        return self


class ReplaceResult(NamedTuple):
    string: str
    changed: bool
    error: Optional[Exception] = None
    kind: Optional[ErrorKind] = None

    def raise_error(self) -> 'ReplaceResult':
        if self.error is not None:
            raise self.error

        return self


NOT_FOUND = LocateResult(-1, -1, False)


def _locate_error(error: SectionReplaceException) -> LocateResult:
    return NOT_FOUND._replace(error=error, kind=error.kind)


def _replace_error(string: str, changed: bool, error: SectionReplaceException) -> ReplaceResult:
    return ReplaceResult(string, changed, error, error.kind)


def _validate_markers(opening_marker: str, closing_marker: str) -> Optional[SectionReplaceException]:
    if opening_marker == '':
        return EmptyOpeningMarkerException()

    if closing_marker == '':
        return EmptyClosingMarkerException()

    return None


def _validate_arguments(opening_marker: str, closing_marker: str,
                        transformer: Optional[Transformer]) -> Optional[SectionReplaceException]:
    error = _validate_markers(opening_marker, closing_marker)
    if error is None and transformer is None:
        error = MissingTransformerException()

    return error


def _locate(string: str, opening_marker: str, closing_marker: str) -> LocateResult:
    closing_index = string.find(closing_marker)
    if closing_index == -1:
        if opening_marker in string:
            return _locate_error(UnmatchedOpeningMarkerException())

        return NOT_FOUND

    closing_end = closing_index + len(closing_marker)

    opening_index = string.rfind(opening_marker, 0, closing_end)
    if opening_index == -1:
        return _locate_error(UnmatchedClosingMarkerException())

    return LocateResult(opening_index, closing_end, True)


def _replace_one(string: str, opening_marker: str, closing_marker: str, transformer: Transformer) -> ReplaceResult:
    start, end, found, error, _ = _locate(string, opening_marker, closing_marker)
    if error is not None:
        return _replace_error(string, False, error)

    if not found:
        return ReplaceResult(string, False)

    prefix = string[:start]
    interior = string[start + len(opening_marker):end - len(closing_marker)]
    suffix = string[end:]

    try:
        replaced = prefix + transformer(interior) + suffix
    except Exception as exception:
        return ReplaceResult(string, False, exception, ErrorKind.TRANSFORMER_FAILURE)

    return ReplaceResult(replaced, True)


def locate(string: str, opening_marker: str, closing_marker: str) -> LocateResult:
    """
    Find the first, innermost section of a string.

    Returns the range `[start, end)` of the section (markers included),
    whether a section was found, and an error.
    When nothing is found (or on error), `start` and `end` are both -1.
    """
    error = _validate_markers(opening_marker, closing_marker)
    if error is not None:
        return _locate_error(error)

    if string == '':
        return NOT_FOUND

    return _locate(string, opening_marker, closing_marker)


def replace_one(string: str, opening_marker: str, closing_marker: str,
                transformer: Optional[Transformer]) -> ReplaceResult:
    """
    Replace the section found by `locate`.

    The transformer is called once, on the interior of the section (markers excluded),
    and its return value replaces the whole section.
    The transformer must return a string.
    Any exception raised by the transformer (or a non-string return value) is returned
    alongside the untouched input, with kind `ErrorKind.TRANSFORMER_FAILURE`.
    """
    error = _validate_arguments(opening_marker, closing_marker, transformer)
    if error is not None:
        return _replace_error(string, False, error)

    if string == '':
        return ReplaceResult(string, False)

    return _replace_one(string, opening_marker, closing_marker, transformer)


def replace_all(string: str, opening_marker: str, closing_marker: str,
                transformer: Optional[Transformer]) -> ReplaceResult:
    """
    Replace sections repeatedly until no section remains.

    Replacements may introduce new sections, which are replaced in turn;
    a transformer that always reintroduces a section will loop forever.
    On error, the text produced by the last successful replacement is returned.
    """
    error = _validate_arguments(opening_marker, closing_marker, transformer)
    if error is not None:
        return _replace_error(string, False, error)

    if string == '':
        return ReplaceResult(string, False)

    changed = False
    while True:
        result = _replace_one(string, opening_marker, closing_marker, transformer)
        if result.error is not None:
            return result._replace(string=string, changed=changed)

        if not result.changed:
            break

        string = result.string
        changed = True

    return ReplaceResult(string, changed)
