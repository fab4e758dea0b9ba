"""
HTML transcript builder.

Turns the cues of a document into an HTML transcript: sections (split at
caller-supplied time codes) of sentences (found by a sentence splitter).
"""

import logging
from typing import Iterable, List, Optional, Sequence

from ..cuetext import parse_cue_text
from ..exceptions import CueTextError, ErrorKind, RebalanceError, WebVTTError
from ..models import Cue, HTMLConfig
from .rebalancer import rebalance_tags
from .splitter import BOUNDARY, SentenceSplitter, split_sentences

logger = logging.getLogger(__name__)


class TranscriptBuilder:
    """
    Builds HTML transcripts from cues.

    Each section looks like this (with the default tags):

        <section>
        <p>First sentence.</p>
        <p>Second sentence.</p>
        </section>

    Example:
        >>> from vttdoc import parse_vtt
        >>> doc = parse_vtt("WEBVTT\\n\\n00:01.000 --> 00:02.000\\nHi. Bye.")
        >>> print(TranscriptBuilder().render(doc.cues), end="")
        <section>
        <p>Hi.</p>
        <p>Bye.</p>
        </section>
    """

    def __init__(self, config: Optional[HTMLConfig] = None):
        """
        Initialize transcript builder.

        Args:
            config: Tag names, sentence splitter and strictness
                (default: HTMLConfig())
        """
        self.config = config or HTMLConfig()
        self.splitter: SentenceSplitter = self.config.sentence_splitter or split_sentences

    def render(self, cues: Iterable[Cue], timecodes: Optional[Sequence[float]] = None) -> str:
        """
        Render cues as HTML sections.

        A new section starts at the first cue whose start time is at or
        after the next time code. Sections without text are left out.

        Args:
            cues: Cues in order
            timecodes: Ascending times in seconds where sections start

        Returns:
            HTML text, one line per section tag and per sentence

        Raises:
            WebVTTError: SPLITTER_INVALID_TEXT if the sentence splitter
                broke the tag structure of the text
        """
        pending = list(timecodes or [])
        sections: List[str] = []
        text = ""

        for cue in cues:
            while pending and cue.start >= pending[0]:
                sections.append(self.render_section(text))
                text = ""
                pending.pop(0)
            cue_text = cue.text.flatten(close_all=True)
            text = f"{text}\n{cue_text}" if text else cue_text

        sections.append(self.render_section(text))
        result = "".join(sections)
        logger.info(f"Rendered transcript with {sum(1 for s in sections if s)} sections")
        return result

    def render_section(self, text: str) -> str:
        """Render cue text (with all end tags written) as one section."""
        if not text:
            return ""

        strict = self.config.strictness > 0
        marked = self.splitter(text)
        try:
            balanced = rebalance_tags(marked, strict)
            html = parse_cue_text(balanced, strict).to_html()
        except (RebalanceError, CueTextError) as e:
            raise WebVTTError(
                ErrorKind.SPLITTER_INVALID_TEXT, e.context, details=e.message
            ) from e

        sentence_tag = self.config.sentence_tag
        section_tag = self.config.section_tag
        html = html.replace(BOUNDARY, f"</{sentence_tag}>\n<{sentence_tag}>")
        logger.debug(f"Section with {marked.count(BOUNDARY) + 1} sentences")
        return (
            f"<{section_tag}>\n"
            f"<{sentence_tag}>{html}</{sentence_tag}>\n"
            f"</{section_tag}>\n"
        )


def render_html(
    cues: Iterable[Cue],
    timecodes: Optional[Sequence[float]] = None,
    section_tag: str = "section",
    sentence_tag: str = "p",
    sentence_splitter: Optional[SentenceSplitter] = None,
    strictness: int = 1,
) -> str:
    """
    Render cues as an HTML transcript.

    Keyword form of TranscriptBuilder(HTMLConfig(...)).render(cues, timecodes).
    """
    config = HTMLConfig(
        section_tag=section_tag,
        sentence_tag=sentence_tag,
        sentence_splitter=sentence_splitter,
        strictness=strictness,
    )
    return TranscriptBuilder(config).render(cues, timecodes)
