"""
vttdoc - WebVTT Document Toolkit

Parses WebVTT text into a document model, writes it back in WebVTT syntax
and renders the cues as an HTML transcript.

Features:
- Block grammar: REGION, STYLE, NOTE and cue blocks, with the line number
  and context of the first error
- Cue text grammar: nested <v>, <i>, <b>, <u>, <c>, <lang>, <ruby>, <rt>
  spans and inline timestamps
- Round trip: str(document) is canonical WebVTT that parses back to the
  same cues, regions and styles
- HTML transcripts split into sections and sentences, with a pluggable
  sentence splitter

Example usage:
    >>> from vttdoc import parse_vtt
    >>>
    >>> doc = parse_vtt("WEBVTT\\n\\n00:01.000 --> 00:03.000\\n<v Esme>Hee!</v> <i>laughter</i>")
    >>> doc.cues[0].text.plain_text()
    'Hee! laughter'
    >>> print(doc.to_html(), end="")
    <section>
    <p><span title="Esme">Hee!</span> <i>laughter</i></p>
    </section>
"""

import logging

__version__ = "0.1.0"
__author__ = "vttdoc Contributors"
__license__ = "MIT"

# Add NullHandler to prevent "No handler found" warnings
# Users should configure logging in their application if they want to see logs
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Timestamp conversion
from .utils import parse_timestamp, format_timestamp

# Errors
from .exceptions import (
    ErrorKind,
    VTTDocError,
    WebVTTError,
    CueTextError,
    RebalanceError,
)

# Cue text
from .cuetext import (
    CueText,
    CueTimestamp,
    Span,
    KNOWN_TAGS,
    parse_cue_text,
)

# Data models
from .models import (
    Document,
    Region,
    Style,
    Note,
    Cue,
    ParseConfig,
    HTMLConfig,
)

# Parsing and writing
from .parser import WebVTTParser, parse_vtt
from .writer import format_document
from .loader import load_text, load_vtt, parse_file, write_file

# HTML transcripts
from .transcript import (
    BOUNDARY,
    split_sentences,
    rebalance_tags,
    check_tags,
    TranscriptBuilder,
    render_html,
)

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__license__",

    # Timestamps
    "parse_timestamp",
    "format_timestamp",

    # Errors
    "ErrorKind",
    "VTTDocError",
    "WebVTTError",
    "CueTextError",
    "RebalanceError",

    # Cue text
    "CueText",
    "CueTimestamp",
    "Span",
    "KNOWN_TAGS",
    "parse_cue_text",

    # Models
    "Document",
    "Region",
    "Style",
    "Note",
    "Cue",
    "ParseConfig",
    "HTMLConfig",

    # Parsing and writing
    "WebVTTParser",
    "parse_vtt",
    "format_document",
    "load_text",
    "load_vtt",
    "parse_file",
    "write_file",

    # HTML transcripts
    "BOUNDARY",
    "split_sentences",
    "rebalance_tags",
    "check_tags",
    "TranscriptBuilder",
    "render_html",
]
