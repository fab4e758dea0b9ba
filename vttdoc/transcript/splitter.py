"""
Sentence splitter for cue text.

A sentence splitter is any callable that takes WebVTT cue text and returns
it with BOUNDARY inserted at every sentence end, changing nothing else
except that the white space between two sentences may be replaced by the
marker. split_sentences() is the default heuristic.
"""

import re
from typing import Callable

# Marks a sentence boundary until the transcript builder turns it into HTML.
# Not white space, so the splitter patterns never consume it.
BOUNDARY = "\x02"

SentenceSplitter = Callable[[str], str]

# Words whose trailing period does not end a sentence
ABBREVIATIONS = frozenset(["Mr", "Mrs", "Ms", "Dr", "Prof", "St", "Jr", "Sr", "vs"])

# Both patterns match a whole tag first so that text inside tags
# (e.g. the annotation in <v Dr. Who>) is never split
_TAG = r'<[^>]*>'

# ". ", "! ", "? ", "... ", "… " (optionally followed by end or timestamp
# tags), then optional quotes/brackets and start tags, then a letter
# (checked for upper case by _split_at_sentence_end)
_SENTENCE_END_RE = re.compile(
    rf'({_TAG})'
    r'|(\.\.\.|…|[.!?])'
    r'((?:</[^>]*>|<\d[^>]*>)*)'
    r'\s+'
    r'(?=((?:["\'“‘«(\[¡¿]|<[^/>][^>]*>)*)([^\W\d_]))'
)

# Ideographic and full-width sentence ends, with optional closing
# punctuation, directly followed by more text
_IDEOGRAPHIC_END_RE = re.compile(
    rf'({_TAG})'
    r'|([。！？．｡]+[」』）】〕〉》”’"]*)'
    rf'(?=[^\s<{BOUNDARY}])'
)
_LAST_WORD_RE = re.compile(r'(\w+)$')


def _split_at_sentence_end(match) -> str:
    tag, punctuation, tags, _opening, letter = match.groups()
    if tag is not None or not letter.isupper():
        return match.group(0)
    if punctuation == ".":
        start = match.start()
        word = _LAST_WORD_RE.search(match.string, max(0, start - 10), start)
        if word and word.group(1) in ABBREVIATIONS:
            return match.group(0)
    return punctuation + tags + BOUNDARY


def _split_at_ideographic_end(match) -> str:
    tag, punctuation = match.groups()
    if tag is not None:
        return tag
    return punctuation + BOUNDARY


def split_sentences(text: str) -> str:
    """
    Insert BOUNDARY at each sentence end in cue text.

    Western punctuation ends a sentence when white space and an upper-case
    letter follow (possibly with tags, quotes or brackets in between); the
    white space is replaced by the marker. Ideographic punctuation ends a
    sentence whenever more text follows; the marker is inserted after it.

    Args:
        text: Cue text, possibly with tags

    Returns:
        The text with sentence boundaries marked

    Example:
        >>> split_sentences("<i>Hi there! What is your name?</i>") == (
        ...     "<i>Hi there!" + BOUNDARY + "What is your name?</i>")
        True
    """
    text = _SENTENCE_END_RE.sub(_split_at_sentence_end, text)
    return _IDEOGRAPHIC_END_RE.sub(_split_at_ideographic_end, text)
