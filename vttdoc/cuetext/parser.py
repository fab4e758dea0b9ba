"""
Cue text parser.

Recursive descent over one line of cue text at a time. Spans cannot cross
line boundaries; a <v> span may leave out its end tag at the end of a line.
"""

import logging
import re
from typing import List, Sequence, Union

from ..exceptions import CueTextError, ErrorKind
from .nodes import KNOWN_TAGS, CueNode, CueText, CueTimestamp, Span

logger = logging.getLogger(__name__)

# Pre-compiled regex patterns
_LINE_SPLIT_RE = re.compile(r'\r\n|\r|\n')
_START_TAG_RE = re.compile(
    r'<(' + '|'.join(KNOWN_TAGS) + r')(\.[^ \t>]*)?(?:[ \t]+([^>]*))?>'
)
_END_TAG_RE = re.compile(r'</([^ \t<>]+)>')
_TIMESTAMP_TAG_RE = re.compile(r'<((?:\d+:)?\d{2}:\d{2}\.\d{3})>')
_ANY_TAG_RE = re.compile(r'<[^<>]*>')


def _append_text(nodes: List[CueNode], text: str) -> None:
    # Runs separated by a dropped tag are merged so a reparse gives the same tree
    if nodes and isinstance(nodes[-1], str) and nodes[-1] != "\n":
        nodes[-1] += text
    else:
        nodes.append(text)


class _LineParser:
    """Parses a single line; pos is the index of the first unparsed character."""

    def __init__(self, line: str, line_index: int, strict: bool):
        self.line = line
        self.line_index = line_index
        self.strict = strict
        self.pos = 0

    def error(self, kind: ErrorKind, context: str) -> CueTextError:
        return CueTextError(kind, context, self.line_index)

    def parse(self) -> List[CueNode]:
        nodes = self.parse_nodes()
        if self.pos < len(self.line):
            # An end tag with no matching start tag
            raise self.error(ErrorKind.MALFORMED_TAG, self.line[self.pos:])
        return nodes

    def parse_nodes(self) -> List[CueNode]:
        """Parse nodes until the end of the line or an end tag of a known span."""
        line = self.line
        nodes: List[CueNode] = []

        while self.pos < len(line):
            if not line.startswith("<", self.pos):
                end = line.find("<", self.pos)
                if end == -1:
                    end = len(line)
                _append_text(nodes, line[self.pos:end])
                self.pos = end
                continue

            if line.startswith("</", self.pos):
                match = _END_TAG_RE.match(line, self.pos)
                if match and match.group(1) in KNOWN_TAGS:
                    break  # for the enclosing span to check
                self._unknown_tag(match or _ANY_TAG_RE.match(line, self.pos))
                continue

            match = _START_TAG_RE.match(line, self.pos)
            if match:
                nodes.append(self._parse_span(match))
                continue

            match = _TIMESTAMP_TAG_RE.match(line, self.pos)
            if match:
                nodes.append(CueTimestamp(match.group(1)))
                self.pos = match.end()
                continue

            self._unknown_tag(_ANY_TAG_RE.match(line, self.pos))

        return nodes

    def _unknown_tag(self, match) -> None:
        """Skip a tag outside the grammar in lenient mode, fail otherwise."""
        if match is None:
            raise self.error(ErrorKind.MALFORMED_TAG, self.line[self.pos:])
        if self.strict:
            raise self.error(ErrorKind.UNKNOWN_TAG, self.line[self.pos:])
        logger.debug(f"Dropping unknown tag {match.group(0)!r}")
        self.pos = match.end()

    def _parse_span(self, match) -> Span:
        tag, classes, annotation = match.groups()
        span = Span(
            tag=tag,
            classes=[c for c in (classes or "").split(".") if c],
            annotation=annotation or "",
        )
        self.pos = match.end()
        span.children = self.parse_nodes()

        end_tag = f"</{tag}>"
        if self.line.startswith(end_tag, self.pos):
            self.pos += len(end_tag)
        elif tag == "v" and self.pos == len(self.line):
            span.implicit_close = True
        else:
            raise self.error(ErrorKind.UNCLOSED_TAG, self.line[self.pos:] or match.group(0))
        return span


def parse_cue_text(text: Union[str, Sequence[str]], strict: bool = True) -> CueText:
    """
    Parse cue text into a CueText tree.

    Args:
        text: Cue text, either one string (lines separated by line
            terminators) or a sequence of lines
        strict: Raise on tags outside the grammar; when False they are
            dropped and their content is kept

    Returns:
        CueText with one "\\n" run between consecutive lines

    Raises:
        CueTextError: UNKNOWN_TAG, UNCLOSED_TAG or MALFORMED_TAG, with the
            index of the failing line

    Example:
        >>> str(parse_cue_text(["Where did he go?", "<v Esme>Hee!"]))
        'Where did he go?\\n<v Esme>Hee!'
    """
    lines = _LINE_SPLIT_RE.split(text) if isinstance(text, str) else list(text)
    nodes: List[CueNode] = []
    for index, line in enumerate(lines):
        if index > 0:
            nodes.append("\n")
        nodes.extend(_LineParser(line, index, strict).parse())
    return CueText(nodes)
