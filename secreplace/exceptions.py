"""
# Section Replace: exceptions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Exception classes.
"""

import enum


class ErrorKind(enum.Enum):
    EMPTY_OPEN_MARKER = 'empty opening marker'
    EMPTY_CLOSE_MARKER = 'empty closing marker'
    NIL_TRANSFORMER = 'missing transformer'
    UNMATCHED_OPEN = 'no matching close'
    UNMATCHED_CLOSE = 'no matching open'
    TRANSFORMER_FAILURE = 'transformer failure'


class SectionReplaceException(Exception):
    _kind: ErrorKind

    def __init__(self, kind: ErrorKind):
        super().__init__(f'secreplace: {kind.value}')
        self._kind = kind

    @property
    def kind(self) -> ErrorKind:
        return self._kind


class EmptyOpeningMarkerException(SectionReplaceException):
    def __init__(self):
        super().__init__(ErrorKind.EMPTY_OPEN_MARKER)


class EmptyClosingMarkerException(SectionReplaceException):
    def __init__(self):
        super().__init__(ErrorKind.EMPTY_CLOSE_MARKER)


class MissingTransformerException(SectionReplaceException):
    def __init__(self):
        super().__init__(ErrorKind.NIL_TRANSFORMER)


class UnmatchedOpeningMarkerException(SectionReplaceException):
    """
    An opening marker with no closing marker to its right.
    """
    def __init__(self):
        super().__init__(ErrorKind.UNMATCHED_OPEN)


class UnmatchedClosingMarkerException(SectionReplaceException):
    """
    A closing marker with no opening marker to its left.
    """
    def __init__(self):
        super().__init__(ErrorKind.UNMATCHED_CLOSE)


class UnrecognisedNameException(Exception):
    _name: str

    def __init__(self, name: str):
        super().__init__(f'unrecognised name `{name}`')
        self._name = name

    @property
    def name(self) -> str:
        return self._name

