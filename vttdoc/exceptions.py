"""
Exceptions for vttdoc.

Exception hierarchy:
    VTTDocError
    ├── WebVTTError     - raised to callers by the parser, loader and builder
    ├── CueTextError    - cue-text grammar failure (re-raised as WebVTTError)
    └── RebalanceError  - tag structure failure (re-raised as WebVTTError)

Every error carries an ErrorKind from a closed set.
"""

from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .models import Document

NO_SOURCE = "<none>"


class ErrorKind(Enum):
    """Kinds of WebVTT errors, with their human readable description."""

    IO_FAILURE = "I/O failure"
    MISSING_HEADER = 'Missing "WEBVTT" at start of text'
    EXPECTED_BLANK_LINE = "Expected a line terminator"
    MALFORMED_TIMESTAMP = "Expected a timestamp"
    UNKNOWN_REGION_SETTING = "Unknown region setting"
    DUPLICATE_REGION_SETTING = "Region setting occurs twice"
    UNKNOWN_CUE_SETTING = "Unknown cue setting"
    UNKNOWN_TAG = "Unknown tag"
    UNCLOSED_TAG = "Missing end tag"
    MALFORMED_TAG = "Incorrect tag"
    UNMATCHED_TAG = "End tag does not match start tag"
    SPLITTER_INVALID_TEXT = "Sentence splitter produced invalid text"

    @property
    def description(self) -> str:
        return self.value


def format_context(context: str) -> str:
    """
    Shorten and escape a text snippet for use in an error message.

    Snippets longer than 23 characters are cut to 20 and get "...";
    CR, LF and TAB are shown as escapes.

    Example:
        >>> format_context("00:01.000 --> 00:02.000 foo:bar")
        '00:01.000 --> 00:02....'
    """
    if len(context) > 23:
        context = context[:20] + "..."
    return context.replace("\r", "\\r").replace("\n", "\\n").replace("\t", "\\t")


class VTTDocError(Exception):
    """Base exception for all vttdoc errors."""

    def __init__(self, message: str, details: Optional[str] = None) -> None:
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


class WebVTTError(VTTDocError):
    """
    A grammar or I/O error in a WebVTT document.

    Attributes:
        kind: ErrorKind of the failure
        context: the offending text, already shortened and escaped
        line: 0-based line number, or -1 when not line-specific
        source: file name or URL, or "<none>" for in-memory text
        document: blocks parsed before the failure (None outside the parser)
    """

    def __init__(
        self,
        kind: ErrorKind,
        context: str = "",
        line: int = -1,
        source: str = NO_SOURCE,
        document: Optional["Document"] = None,
        details: Optional[str] = None,
    ) -> None:
        self.kind = kind
        self.context = format_context(context)
        self.line = line
        self.source = source
        self.document = document
        message = f"{source}:{line}: error: {kind.description}"
        if self.context:
            message += f' at "{self.context}"'
        super().__init__(message, details)


class CueTextError(VTTDocError):
    """Cue text does not follow the span/tag grammar."""

    def __init__(self, kind: ErrorKind, context: str, line_index: int = 0) -> None:
        self.kind = kind
        self.context = context
        self.line_index = line_index
        super().__init__(f"{kind.description}: {format_context(context)}")


class RebalanceError(VTTDocError):
    """Start and end tags do not pair up."""

    def __init__(self, kind: ErrorKind, context: str) -> None:
        self.kind = kind
        self.context = context
        super().__init__(f"{kind.description}: {format_context(context)}")
