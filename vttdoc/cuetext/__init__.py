"""
Cue text package.

Parses the span/tag language inside cue payloads into a tree and writes the
tree back as WebVTT cue text or as HTML.
"""

from .nodes import (
    KNOWN_TAGS,
    HTML_TAGS,
    CueNode,
    CueText,
    CueTimestamp,
    Span,
    flatten_nodes,
    nodes_to_html,
    nodes_plain_text,
)

from .parser import parse_cue_text

__all__ = [
    # Tree
    "CueText",
    "CueNode",
    "CueTimestamp",
    "Span",
    "KNOWN_TAGS",
    "HTML_TAGS",

    # Parsing and serialization
    "parse_cue_text",
    "flatten_nodes",
    "nodes_to_html",
    "nodes_plain_text",
]
