"""Transcript package: HTML transcripts with a pluggable sentence splitter."""

from .splitter import BOUNDARY, ABBREVIATIONS, SentenceSplitter, split_sentences
from .rebalancer import rebalance_tags, check_tags
from .builder import TranscriptBuilder, render_html

__all__ = [
    "BOUNDARY",
    "ABBREVIATIONS",
    "SentenceSplitter",
    "split_sentences",
    "rebalance_tags",
    "check_tags",
    "TranscriptBuilder",
    "render_html",
]
