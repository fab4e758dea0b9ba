"""
WebVTT block parser.

Splits a WebVTT text into REGION, STYLE, NOTE and cue blocks and builds a
Document. Parsing stops at the first error; the WebVTTError raised then
carries the document parsed so far.
"""

import logging
import re
from typing import Dict, List, Optional

from .cuetext import parse_cue_text
from .exceptions import NO_SOURCE, CueTextError, ErrorKind, WebVTTError
from .models import (
    CUE_SETTINGS,
    REGION_SETTINGS,
    Cue,
    Document,
    Note,
    ParseConfig,
    Region,
    Style,
)
from .utils import TIMESTAMP_PATTERN, timestamp_parts_to_seconds

logger = logging.getLogger(__name__)

BOM = "\ufeff"

# Pre-compiled regex patterns
_LINE_SPLIT_RE = re.compile(r'\r\n|\r|\n')
_HEADER_RE = re.compile(r'^WEBVTT[ \t]*$')
_REGION_RE = re.compile(r'^REGION[ \t]*$')
_STYLE_RE = re.compile(r'^STYLE[ \t]*$')
_NOTE_RE = re.compile(r'^NOTE(?:[ \t]|$)')
_FIELD_SPLIT_RE = re.compile(r'[ \t]+')
_REGION_SETTING_RE = re.compile(r'^([^:]+):(.+)$')
_CUE_SETTING_RE = re.compile(r'^([^:]+):(.*)$')
_TIMING_RE = re.compile(
    rf'^{TIMESTAMP_PATTERN}[ \t]+-->[ \t]+{TIMESTAMP_PATTERN}(?:[ \t]+(.*))?$'
)


class _ParseState:
    """Cursor and results of one parse call."""

    def __init__(self, lines: List[str], document: Document):
        self.lines = lines
        self.document = document
        self.pos = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.lines)

    @property
    def current(self) -> str:
        return self.lines[self.pos]

    def block_lines(self) -> List[str]:
        """Consume the lines after a block header, up to a blank line or the end."""
        collected = []
        self.pos += 1
        while not self.at_end() and self.current != "":
            collected.append(self.current)
            self.pos += 1
        return collected

    def error(self, kind: ErrorKind, context: str, line: Optional[int] = None) -> WebVTTError:
        return WebVTTError(
            kind,
            context,
            self.pos if line is None else line,
            self.document.source,
            self.document,
        )


def _fields(line: str) -> List[str]:
    return [f for f in _FIELD_SPLIT_RE.split(line) if f]


class WebVTTParser:
    """
    Parser for WebVTT text.

    The same parser can be used for several documents in turn; each call
    to parse() starts a new Document, which is also kept in the document
    attribute.

    Example:
        >>> parser = WebVTTParser()
        >>> doc = parser.parse("WEBVTT\\n\\n00:00.000 --> 00:02.120\\nHi!")
        >>> doc.cues[0].end
        2.12
    """

    def __init__(self, config: Optional[ParseConfig] = None):
        """
        Initialize WebVTT parser.

        Args:
            config: Parsing options (default: strict, notes kept)
        """
        self.config = config or ParseConfig()
        self.document = Document()

    def parse(self, text: str, source: str = NO_SOURCE) -> Document:
        """
        Parse WebVTT text.

        Args:
            text: Text of a WebVTT file
            source: Name of the file or URL the text came from, used in
                error messages

        Returns:
            The parsed Document

        Raises:
            WebVTTError: At the first grammar error
        """
        self.document = Document(source=source)

        if text.startswith(BOM):
            text = text[1:]
        state = _ParseState(_LINE_SPLIT_RE.split(text), self.document)

        if not _HEADER_RE.match(state.current):
            raise state.error(ErrorKind.MISSING_HEADER, state.current, 0)
        state.pos = 1
        if not state.at_end() and state.current != "":
            raise state.error(ErrorKind.EXPECTED_BLANK_LINE, state.current)
        state.pos = 2

        # Region, style and comment blocks
        while not state.at_end():
            line = state.current
            if line == "":
                state.pos += 1
            elif _REGION_RE.match(line):
                self._region_block(state)
            elif _NOTE_RE.match(line):
                self._note_block(state)
            elif _STYLE_RE.match(line):
                self._style_block(state)
            else:
                break

        # Cue and comment blocks
        while not state.at_end():
            line = state.current
            if line == "":
                state.pos += 1
            elif _NOTE_RE.match(line):
                self._note_block(state)
            else:
                self._cue_block(state)

        logger.info(
            f"Parsed {source}: {len(self.document.cues)} cues, "
            f"{len(self.document.regions)} regions"
        )
        return self.document

    def parse_file(self, source: str) -> Document:
        """
        Read a file or http(s) URL and parse it.

        Raises:
            WebVTTError: IO_FAILURE if the source cannot be read, or a
                grammar error
        """
        from .loader import load_text
        self.document = Document(source=source)
        try:
            text = load_text(source)
        except WebVTTError as e:
            e.document = self.document
            raise
        return self.parse(text, source)

    def _region_block(self, state: _ParseState) -> None:
        region = Region(line=state.pos)
        settings: Dict[str, str] = region.settings
        strict = self.config.strict

        state.pos += 1
        while not state.at_end() and state.current != "":
            for fragment in _fields(state.current):
                match = _REGION_SETTING_RE.match(fragment)
                if not match or match.group(1) not in REGION_SETTINGS:
                    if strict:
                        raise state.error(ErrorKind.UNKNOWN_REGION_SETTING, fragment)
                    logger.debug(f"Dropping region setting {fragment!r} on line {state.pos}")
                    continue
                key, value = match.groups()
                if key in settings and strict:
                    raise state.error(ErrorKind.DUPLICATE_REGION_SETTING, key)
                settings[key] = value
            state.pos += 1

        self.document.blocks.append(region)
        logger.debug(f"Region block at line {region.line}: {settings}")

    def _style_block(self, state: _ParseState) -> None:
        start = state.pos
        text = "".join(f"{line}\n" for line in state.block_lines())
        self.document.blocks.append(Style(text=text, line=start))

    def _note_block(self, state: _ParseState) -> None:
        start = state.pos
        first = state.current[4:].lstrip(" \t")
        lines = state.block_lines()
        if self.config.keep_notes:
            text = "\n".join(([first] if first else []) + lines)
            self.document.blocks.append(Note(text=text, line=start))

    def _cue_block(self, state: _ParseState) -> None:
        # Optional identifier: any line without "-->"
        identifier = ""
        if "-->" not in state.current:
            identifier = state.current
            state.pos += 1
            if state.at_end():
                raise state.error(ErrorKind.MALFORMED_TIMESTAMP, "", state.pos - 1)

        match = _TIMING_RE.match(state.current)
        if not match:
            raise state.error(ErrorKind.MALFORMED_TIMESTAMP, state.current)
        timing_line = state.pos
        start = timestamp_parts_to_seconds(*match.group(1, 2, 3))
        end = timestamp_parts_to_seconds(*match.group(4, 5, 6))
        settings = self._cue_settings(state, match.group(7) or "")

        text_lines = state.block_lines()
        try:
            text = parse_cue_text(text_lines, strict=self.config.strict)
        except CueTextError as e:
            raise state.error(e.kind, e.context, timing_line + 1 + e.line_index) from e

        self.document.blocks.append(Cue(
            start=start,
            end=end,
            text=text,
            identifier=identifier,
            settings=settings,
            line=timing_line,
        ))

    def _cue_settings(self, state: _ParseState, text: str) -> Dict[str, str]:
        settings: Dict[str, str] = {}
        for fragment in _fields(text):
            match = _CUE_SETTING_RE.match(fragment)
            if not match or match.group(1) not in CUE_SETTINGS:
                if self.config.strict:
                    raise state.error(ErrorKind.UNKNOWN_CUE_SETTING, fragment)
                logger.debug(f"Dropping cue setting {fragment!r} on line {state.pos}")
                continue
            settings[match.group(1)] = match.group(2)
        return settings


def parse_vtt(
    text: str,
    strictness: int = 1,
    keep_notes: bool = True,
    source: str = NO_SOURCE,
) -> Document:
    """
    Parse WebVTT text into a Document.

    Args:
        text: WebVTT text
        strictness: 0 for lenient parsing, anything higher for strict
        keep_notes: Keep NOTE blocks in the document
        source: Name used for the text in error messages

    Returns:
        The parsed Document

    Raises:
        WebVTTError: At the first grammar error

    Example:
        >>> doc = parse_vtt("WEBVTT\\n\\n1\\n00:01.000 --> 00:02.500\\n<i>Hello</i>")
        >>> doc.cues[0].identifier, doc.cues[0].start
        ('1', 1.0)
    """
    parser = WebVTTParser(ParseConfig(strictness=strictness, keep_notes=keep_notes))
    return parser.parse(text, source)
