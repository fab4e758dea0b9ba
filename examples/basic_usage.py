"""
Basic vttdoc usage example.

Demonstrates parsing a WebVTT file from a path or URL and writing it back
in canonical form.
"""

import sys

from vttdoc import WebVTTParser, WebVTTError, format_timestamp

def main():
    source = sys.argv[1] if len(sys.argv) > 1 else "https://example.com/subtitles.vtt"

    # Parse VTT file
    print(f"Parsing {source}...")
    parser = WebVTTParser()
    try:
        doc = parser.parse_file(source)
    except WebVTTError as e:
        print(f"Error: {e}")
        print(f"Parsed {len(e.document.cues)} cues before the error")
        return

    for cue in doc.cues:
        print(f"{format_timestamp(cue.start)} {cue.text.plain_text()}")

    # Write canonical WebVTT
    output_file = "canonical.vtt"
    doc.write(output_file)
    print(f"\nParsed {len(doc.cues)} cues")
    print(f"Output saved to: {output_file}")

if __name__ == "__main__":
    main()
