import time

import pytest

from vttdoc.exceptions import ErrorKind, RebalanceError, WebVTTError
from vttdoc.models import HTMLConfig
from vttdoc.parser import parse_vtt
from vttdoc.transcript import (
    BOUNDARY,
    TranscriptBuilder,
    check_tags,
    rebalance_tags,
    render_html,
    split_sentences,
)

B = BOUNDARY


def test_split_inside_span():
    assert split_sentences("<i>Hi there! What is your name?</i>") == (
        "<i>Hi there!" + B + "What is your name?</i>"
    )


def test_split_needs_upper_case_letter():
    assert split_sentences("It costs 3.50 now. and then") == "It costs 3.50 now. and then"
    assert split_sentences("Stop. 42 is the answer") == "Stop. 42 is the answer"


def test_split_skips_abbreviations():
    assert split_sentences("Mr. Smith met Dr. Jones.") == "Mr. Smith met Dr. Jones."


def test_split_after_ellipsis_and_question_mark():
    assert split_sentences("Wait... What? No!") == "Wait..." + B + "What?" + B + "No!"
    assert split_sentences("Well… Maybe") == "Well…" + B + "Maybe"


def test_split_around_tags_and_quotes():
    assert split_sentences("<i>Hello.</i> <b>World</b>") == "<i>Hello.</i>" + B + "<b>World</b>"
    assert split_sentences('He left. "Why?" she asked.') == 'He left.' + B + '"Why?" she asked.'
    assert split_sentences("Done.\nNext line") == "Done." + B + "Next line"


def test_split_does_not_leave_start_tag_behind():
    assert split_sentences("Hi.<i> Bye</i>") == "Hi.<i> Bye</i>"
    assert split_sentences("Hi. <i>Bye</i>") == "Hi." + B + "<i>Bye</i>"
    assert split_sentences("<i>Hi.</i><00:01.000> Bye") == "<i>Hi.</i><00:01.000>" + B + "Bye"


def test_split_long_text():
    text = "Hello there friend. " * 5000 + "End"

    started = time.perf_counter()
    result = split_sentences(text)
    elapsed = time.perf_counter() - started

    assert result.count(B) == 5000
    assert result.endswith("friend." + B + "End")
    assert elapsed < 2.0


def test_split_ignores_text_inside_tags():
    assert split_sentences("<v Dr. Who>Hi</v>") == "<v Dr. Who>Hi</v>"
    assert split_sentences("<v Mary. Ann>Hi</v>") == "<v Mary. Ann>Hi</v>"


def test_split_ideographic_punctuation():
    assert split_sentences("今日は。明日も。") == "今日は。" + B + "明日も。"
    assert split_sentences("「はい。」次です") == "「はい。」" + B + "次です"
    assert split_sentences("はい。<i>いいえ</i>") == "はい。<i>いいえ</i>"


def test_split_is_stable():
    once = split_sentences("One. Two! 三。四")
    assert split_sentences(once) == once


def test_rebalance_reopens_tags():
    assert rebalance_tags("<i>Hi there!" + B + "What is your name?</i>") == (
        "<i>Hi there!</i>" + B + "<i>What is your name?</i>"
    )


def test_rebalance_keeps_nesting_and_attributes():
    assert rebalance_tags("<v.loud Joe><b>A." + B + "B</b></v>") == (
        "<v.loud Joe><b>A.</b></v>" + B + "<v.loud Joe><b>B</b></v>"
    )


def test_rebalance_without_open_tags():
    assert rebalance_tags("A." + B + "B.") == "A." + B + "B."


def test_rebalance_closes_voice_at_end():
    assert rebalance_tags("<v Joe>Hello") == "<v Joe>Hello</v>"


def test_rebalance_passes_timestamps_through():
    text = "<c>a<00:00:01.000>b</c><00:02.000>c"
    assert rebalance_tags(text) == text


def test_rebalance_unmatched_end_tag():
    with pytest.raises(RebalanceError) as excinfo:
        rebalance_tags("<i>x</b>")
    assert excinfo.value.kind == ErrorKind.UNMATCHED_TAG

    with pytest.raises(RebalanceError) as excinfo:
        rebalance_tags("x</i>")
    assert excinfo.value.kind == ErrorKind.UNMATCHED_TAG


def test_rebalance_unclosed_tag():
    with pytest.raises(RebalanceError) as excinfo:
        rebalance_tags("<i>x")
    assert excinfo.value.kind == ErrorKind.UNCLOSED_TAG

    with pytest.raises(RebalanceError) as excinfo:
        rebalance_tags("<v Joe><i>x")
    assert excinfo.value.kind == ErrorKind.UNCLOSED_TAG


def test_rebalance_strict_tag_names():
    assert rebalance_tags("<q>x</q>") == "<q>x</q>"
    with pytest.raises(RebalanceError) as excinfo:
        rebalance_tags("<q>x</q>", strict=True)
    assert excinfo.value.kind == ErrorKind.UNKNOWN_TAG


def test_check_tags():
    check_tags("<b><i>x</i></b>")
    with pytest.raises(RebalanceError):
        check_tags("<b><i>x</b></i>")


DOC = parse_vtt(
    "WEBVTT\n\n"
    "00:00.000 --> 00:02.000\nHello there. How are\n\n"
    "00:02.000 --> 00:04.000\nyou? I am fine.\n\n"
    "00:10.000 --> 00:12.000\n<i>New section.</i>\n"
)


def test_render_single_section():
    assert TranscriptBuilder().render(DOC.cues) == (
        "<section>\n"
        "<p>Hello there.</p>\n"
        "<p>How are\nyou?</p>\n"
        "<p>I am fine.</p>\n"
        "<p><i>New section.</i></p>\n"
        "</section>\n"
    )


def test_render_sections_at_timecodes():
    assert TranscriptBuilder().render(DOC.cues, [5]) == (
        "<section>\n"
        "<p>Hello there.</p>\n"
        "<p>How are\nyou?</p>\n"
        "<p>I am fine.</p>\n"
        "</section>\n"
        "<section>\n"
        "<p><i>New section.</i></p>\n"
        "</section>\n"
    )


def test_empty_sections_are_left_out():
    html = TranscriptBuilder().render(DOC.cues, [0, 1, 2.5, 3, 100])
    assert html.count("<section>") == 3
    assert html.startswith("<section>\n<p>Hello there.</p>\n<p>How are</p>\n</section>\n")


def test_render_no_cues():
    assert TranscriptBuilder().render([]) == ""


def test_render_voice_spans_per_sentence():
    doc = parse_vtt("WEBVTT\n\n00:00.000 --> 00:01.000\n<v.loud Joe>Hello. Bye")
    assert doc.to_html() == (
        "<section>\n"
        '<p><span class="loud" title="Joe">Hello.</span></p>\n'
        '<p><span class="loud" title="Joe">Bye</span></p>\n'
        "</section>\n"
    )


def test_custom_tags_and_splitter():
    config = HTMLConfig(
        section_tag="div",
        sentence_tag="span",
        sentence_splitter=lambda text: text.replace("\n", BOUNDARY),
    )
    assert DOC.to_html(config=config) == (
        "<div>\n"
        "<span>Hello there. How are</span>\n"
        "<span>you? I am fine.</span>\n"
        "<span><i>New section.</i></span>\n"
        "</div>\n"
    )


def test_render_html_keywords():
    assert render_html(DOC.cues, [5], section_tag="article") == DOC.to_html(
        [5], HTMLConfig(section_tag="article")
    )


def test_splitter_that_breaks_tags():
    with pytest.raises(WebVTTError) as excinfo:
        render_html(DOC.cues, sentence_splitter=lambda text: text.replace("</i>", ""))
    assert excinfo.value.kind == ErrorKind.SPLITTER_INVALID_TEXT
    assert isinstance(excinfo.value.__cause__, RebalanceError)
