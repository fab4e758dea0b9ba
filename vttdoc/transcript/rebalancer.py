"""
Tag rebalancing around sentence boundaries.

After sentence splitting, a boundary can fall inside a span. The rebalancer
closes every open tag before each boundary and opens them again after it,
so that each sentence is well-formed on its own.
"""

import re
from typing import List, Tuple

from ..cuetext import KNOWN_TAGS
from ..exceptions import ErrorKind, RebalanceError
from .splitter import BOUNDARY

_TOKEN_RE = re.compile(rf'<[^>]*>|{BOUNDARY}')
_TIMESTAMP_TAG_RE = re.compile(r'^<(?:\d+:)?\d{2}:\d{2}\.\d{3}>$')
_END_TAG_RE = re.compile(r'^</([^\s>]*)\s*>$')
_START_TAG_NAME_RE = re.compile(r'^<([^\s./>]*)')


def rebalance_tags(text: str, strict: bool = False) -> str:
    """
    Close and reopen open tags around every sentence boundary.

    Args:
        text: Cue text with BOUNDARY markers
        strict: Reject start tags outside the cue text grammar

    Returns:
        The text with tags closed before and reopened after each marker.
        A <v> still open at the end gets its end tag.

    Raises:
        RebalanceError: UNMATCHED_TAG for an end tag that does not match
            the innermost open tag, UNCLOSED_TAG for tags left open at the
            end, UNKNOWN_TAG for an unknown start tag in strict mode

    Example:
        >>> rebalance_tags("<i>Hi!" + BOUNDARY + "Bye</i>") == (
        ...     "<i>Hi!</i>" + BOUNDARY + "<i>Bye</i>")
        True
    """
    stack: List[Tuple[str, str]] = []  # (name, start tag as written)
    parts = []
    pos = 0

    for match in _TOKEN_RE.finditer(text):
        parts.append(text[pos:match.start()])
        pos = match.end()
        token = match.group(0)

        if token == BOUNDARY:
            parts.extend(f"</{name}>" for name, _ in reversed(stack))
            parts.append(BOUNDARY)
            parts.extend(start_tag for _, start_tag in stack)
            continue

        parts.append(token)
        if _TIMESTAMP_TAG_RE.match(token):
            continue

        end_tag = _END_TAG_RE.match(token)
        if end_tag:
            if not stack or stack[-1][0] != end_tag.group(1):
                raise RebalanceError(ErrorKind.UNMATCHED_TAG, text[match.start():])
            stack.pop()
            continue

        name = _START_TAG_NAME_RE.match(token).group(1)
        if strict and name not in KNOWN_TAGS:
            raise RebalanceError(ErrorKind.UNKNOWN_TAG, token)
        stack.append((name, token))

    parts.append(text[pos:])

    # Only </v> may be left out at the end
    if len(stack) == 1 and stack[0][0] == "v":
        parts.append("</v>")
    elif stack:
        raise RebalanceError(ErrorKind.UNCLOSED_TAG, stack[-1][1])

    return "".join(parts)


def check_tags(text: str, strict: bool = False) -> None:
    """Raise RebalanceError unless every start tag in text has a matching end tag."""
    rebalance_tags(text, strict)
