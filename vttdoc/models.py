"""
Data models for vttdoc.

Defines the document model (blocks of a WebVTT file) and the configuration
objects used by the parser and the HTML transcript builder.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Union

from .cuetext import CueText
from .exceptions import NO_SOURCE

# Known keys in REGION blocks and cue timing lines
REGION_SETTINGS = ("id", "width", "lines", "regionanchor", "viewportanchor", "scroll")
CUE_SETTINGS = ("vertical", "line", "position", "size", "align", "region")


@dataclass
class Region:
    """A REGION block: an on-screen area cues can be placed in."""
    settings: Dict[str, str] = field(default_factory=dict)
    line: int = field(default=-1, compare=False)  # line of the REGION header


@dataclass
class Style:
    """A STYLE block. Every line of text ends with a newline."""
    text: str = ""
    line: int = field(default=-1, compare=False)


@dataclass
class Note:
    """A NOTE block (comment), kept only when ParseConfig.keep_notes is set."""
    text: str = ""
    line: int = field(default=-1, compare=False)


@dataclass
class Cue:
    """
    A cue block.

    start and end are in seconds; the parser does not check that
    end >= start. An empty identifier means the cue has none.
    """
    start: float
    end: float
    text: CueText = field(default_factory=CueText)
    identifier: str = ""
    settings: Dict[str, str] = field(default_factory=dict)
    line: int = field(default=-1, compare=False)  # line of the timing line


Block = Union[Region, Style, Note, Cue]


@dataclass
class Document:
    """
    A parsed WebVTT file: its blocks in source order.

    str() gives the document back in WebVTT syntax (see writer.format_document).
    """
    blocks: List[Block] = field(default_factory=list)
    source: str = field(default=NO_SOURCE, compare=False)

    @property
    def cues(self) -> List[Cue]:
        return [b for b in self.blocks if isinstance(b, Cue)]

    @property
    def regions(self) -> List[Region]:
        return [b for b in self.blocks if isinstance(b, Region)]

    @property
    def notes(self) -> List[Note]:
        return [b for b in self.blocks if isinstance(b, Note)]

    @property
    def styles(self) -> str:
        """The text of all STYLE blocks, concatenated."""
        return "".join(b.text for b in self.blocks if isinstance(b, Style))

    def __str__(self) -> str:
        from .writer import format_document
        return format_document(self)

    def to_html(
        self,
        timecodes: Optional[Sequence[float]] = None,
        config: Optional["HTMLConfig"] = None,
    ) -> str:
        """Render the cues as an HTML transcript (see transcript.TranscriptBuilder)."""
        from .transcript import TranscriptBuilder
        return TranscriptBuilder(config).render(self.cues, timecodes)

    def write(self, path: str) -> None:
        """Write the document to a file in WebVTT syntax."""
        from .loader import write_file
        write_file(self, path)


@dataclass
class ParseConfig:
    """
    Configuration for WebVTTParser.

    strictness 0 is lenient: unknown region settings, cue settings and cue
    text tags are dropped, a repeated region setting overwrites the earlier
    one. Any higher value makes all of these errors.
    """
    strictness: int = 1
    keep_notes: bool = True

    @property
    def strict(self) -> bool:
        return self.strictness > 0


@dataclass
class HTMLConfig:
    """Configuration for TranscriptBuilder."""
    section_tag: str = "section"
    sentence_tag: str = "p"
    sentence_splitter: Optional[Callable[[str], str]] = None  # None: split_sentences
    strictness: int = 1
