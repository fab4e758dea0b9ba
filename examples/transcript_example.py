"""
HTML transcript example.

Demonstrates rendering cues as HTML sections and sentences, with a
custom sentence splitter.
"""

from vttdoc import BOUNDARY, HTMLConfig, parse_vtt

CAPTIONS = """WEBVTT

00:00.000 --> 00:03.000
<v Roger>Welcome back. Today we look at

00:03.000 --> 00:06.000
<v Roger>WebVTT files! Ready?

00:30.000 --> 00:33.000
<i>Music plays.</i> <v Anna>Second part.
"""


def one_sentence_per_line(text):
    return text.replace("\n", BOUNDARY)


def main():
    doc = parse_vtt(CAPTIONS)

    print("Default splitter, new section at 0:30:")
    print(doc.to_html(timecodes=[30]))

    print("One sentence per cue line:")
    config = HTMLConfig(section_tag="div", sentence_splitter=one_sentence_per_line)
    print(doc.to_html(config=config))

if __name__ == "__main__":
    main()
