"""
WebVTT serialization for vttdoc.

Writes a Document back in WebVTT syntax.
"""

from typing import Dict

from .models import Cue, Document, Region
from .utils import format_timestamp


def format_settings(settings: Dict[str, str]) -> str:
    """Format cue settings as " key:value" pairs, in insertion order."""
    return "".join(f" {key}:{value}" for key, value in settings.items())


def format_region(region: Region) -> str:
    content = "REGION\n"
    for key, value in region.settings.items():
        content += f"{key}:{value}\n"
    return content + "\n"


def format_cue(cue: Cue) -> str:
    content = ""
    if cue.identifier:
        content += f"{cue.identifier}\n"
    content += f"{format_timestamp(cue.start)} --> {format_timestamp(cue.end)}"
    content += format_settings(cue.settings)
    content += f"\n{cue.text}\n\n"
    return content


def format_document(document: Document) -> str:
    """
    Format a document as WebVTT text.

    The result is not necessarily the text that was parsed: there is
    nothing after "WEBVTT" on the first line, NOTE blocks are left out,
    all STYLE blocks are merged into one, timestamps have no hours when
    the hours are 0 and every line ends with a single line feed. Parsing
    the result gives back the same cues, regions and style text.

    Args:
        document: Document to format

    Returns:
        WebVTT text

    Example:
        >>> from vttdoc import parse_vtt
        >>> doc = parse_vtt("WEBVTT\\n\\n00:00:01.000 --> 00:00:02.000 align:start\\nHi")
        >>> format_document(doc)
        'WEBVTT\\n\\n00:01.000 --> 00:02.000 align:start\\nHi\\n\\n'
    """
    content = "WEBVTT\n\n"

    for region in document.regions:
        content += format_region(region)

    if document.styles:
        content += f"STYLE\n{document.styles}\n"

    for cue in document.cues:
        content += format_cue(cue)

    return content
