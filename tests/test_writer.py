from vttdoc.models import Cue, Document, Region
from vttdoc.cuetext import parse_cue_text
from vttdoc.parser import parse_vtt
from vttdoc.writer import format_document

SOURCE = (
    "WEBVTT   \r\n"
    "\r\n"
    "REGION\n"
    "id:fred width:40%\n"
    "lines:3\n"
    "\n"
    "STYLE\n"
    "::cue { color: red }\n"
    "\n"
    "NOTE hello\n"
    "\n"
    "STYLE\n"
    "::cue(b) { color: blue }\n"
    "\n"
    "1\n"
    "00:00:01.000 --> 00:00:02.500 region:fred align:start\n"
    "<v Joe>Hello\n"
    "\n"
    "NOTE in between\n"
    "\n"
    "01:00:00.000   -->\t01:00:01.000\n"
    "<i>Bye</i>\n"
    "<c.a..b>now</c>\n"
)

CANONICAL = (
    "WEBVTT\n"
    "\n"
    "REGION\n"
    "id:fred\n"
    "width:40%\n"
    "lines:3\n"
    "\n"
    "STYLE\n"
    "::cue { color: red }\n"
    "::cue(b) { color: blue }\n"
    "\n"
    "1\n"
    "00:01.000 --> 00:02.500 region:fred align:start\n"
    "<v Joe>Hello\n"
    "\n"
    "1:00:00.000 --> 1:00:01.000\n"
    "<i>Bye</i>\n"
    "<c.a.b>now</c>\n"
    "\n"
)


def test_canonical_form():
    assert format_document(parse_vtt(SOURCE)) == CANONICAL


def test_str_is_canonical_form():
    doc = parse_vtt(SOURCE)
    assert str(doc) == format_document(doc)


def test_reparse_gives_same_document_without_notes():
    doc = parse_vtt(SOURCE)
    reparsed = parse_vtt(str(doc))

    assert reparsed.cues == doc.cues
    assert reparsed.regions == doc.regions
    assert reparsed.styles == doc.styles
    assert reparsed.notes == []
    assert str(reparsed) == str(doc)


def test_empty_document():
    assert format_document(Document()) == "WEBVTT\n\n"


def test_built_document():
    doc = Document([
        Region({"id": "r1", "scroll": "up"}),
        Cue(start=0, end=1.25, text=parse_cue_text("<b>Hi</b>"), identifier="a"),
        Cue(start=61, end=62, text=parse_cue_text(["two", "lines"]), settings={"line": "0"}),
    ])
    assert str(doc) == (
        "WEBVTT\n\n"
        "REGION\nid:r1\nscroll:up\n\n"
        "a\n00:00.000 --> 00:01.250\n<b>Hi</b>\n\n"
        "01:01.000 --> 01:02.000 line:0\ntwo\nlines\n\n"
    )
