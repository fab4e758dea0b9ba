"""
Cue text tree.

A cue text is a list of nodes. A node is a plain text run (str), an inline
timestamp (CueTimestamp) or a tagged span (Span) holding more nodes.
Newlines between cue text lines are kept as separate "\\n" runs.
"""

from dataclasses import dataclass, field
from html import escape
from typing import Iterator, List, Union

from ..utils import parse_timestamp

# Tags allowed by the cue text grammar
KNOWN_TAGS = ("v", "i", "b", "u", "c", "lang", "ruby", "rt")

# WebVTT tag name -> HTML element name
HTML_TAGS = {
    "v": "span",
    "lang": "span",
    "c": "span",
    "b": "b",
    "i": "i",
    "u": "u",
    "ruby": "ruby",
    "rt": "rt",
}


@dataclass
class CueTimestamp:
    """An inline timestamp tag such as <00:00:01.250>, kept as written."""
    text: str

    @property
    def seconds(self) -> float:
        return parse_timestamp(self.text)


@dataclass
class Span:
    """A tagged span: <tag.class1.class2 annotation>children</tag>."""
    tag: str
    classes: List[str] = field(default_factory=list)
    annotation: str = ""
    children: List["CueNode"] = field(default_factory=list)
    implicit_close: bool = False  # </v> left out at end of line

    def start_tag(self) -> str:
        s = "<" + self.tag
        if self.classes:
            s += "." + ".".join(self.classes)
        if self.annotation:
            s += " " + self.annotation
        return s + ">"


CueNode = Union[str, CueTimestamp, Span]


def flatten_nodes(nodes: List[CueNode], close_all: bool = False) -> str:
    """
    Serialize nodes back to WebVTT cue text.

    Args:
        nodes: Nodes to serialize
        close_all: Write </v> even where the source left it out

    Returns:
        WebVTT cue text
    """
    parts = []
    for node in nodes:
        if isinstance(node, Span):
            parts.append(node.start_tag())
            parts.append(flatten_nodes(node.children, close_all))
            if close_all or not node.implicit_close:
                parts.append(f"</{node.tag}>")
        elif isinstance(node, CueTimestamp):
            parts.append(f"<{node.text}>")
        else:
            parts.append(node)
    return "".join(parts)


def nodes_to_html(nodes: List[CueNode]) -> str:
    """
    Serialize nodes as an HTML fragment.

    Text runs are copied unchanged, since cue text already escapes "&" and
    "<" as character references. Inline timestamps have no HTML form and
    are left out.
    """
    parts = []
    for node in nodes:
        if isinstance(node, Span):
            name = HTML_TAGS[node.tag]
            attrs = ""
            if node.classes:
                attrs += f' class="{escape(" ".join(node.classes))}"'
            annotation = node.annotation.strip()
            if annotation and node.tag == "v":
                attrs += f' title="{escape(annotation)}"'
            elif annotation and node.tag == "lang":
                attrs += f' lang="{escape(annotation)}"'
            parts.append(f"<{name}{attrs}>{nodes_to_html(node.children)}</{name}>")
        elif isinstance(node, str):
            parts.append(node)
    return "".join(parts)


def nodes_plain_text(nodes: List[CueNode]) -> str:
    """Concatenate the text runs, without any tags."""
    parts = []
    for node in nodes:
        if isinstance(node, Span):
            parts.append(nodes_plain_text(node.children))
        elif isinstance(node, str):
            parts.append(node)
    return "".join(parts)


@dataclass
class CueText:
    """
    The parsed text of one cue.

    str() gives the WebVTT text back; it is identical to the parsed text
    except for class lists with empty entries and tags dropped in lenient
    mode.

    Example:
        >>> from vttdoc import parse_cue_text
        >>> text = parse_cue_text("<v Esme>Hee!</v> <i>laughter</i>")
        >>> text.nodes[0].annotation
        'Esme'
        >>> str(text)
        '<v Esme>Hee!</v> <i>laughter</i>'
    """
    nodes: List[CueNode] = field(default_factory=list)

    def __iter__(self) -> Iterator[CueNode]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def __str__(self) -> str:
        return self.flatten()

    def flatten(self, close_all: bool = False) -> str:
        return flatten_nodes(self.nodes, close_all)

    def to_html(self) -> str:
        return nodes_to_html(self.nodes)

    def plain_text(self) -> str:
        return nodes_plain_text(self.nodes)
