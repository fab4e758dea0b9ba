"""
File and URL I/O for vttdoc.

Reads WebVTT text from local files or http(s) URLs and writes documents back
to files. Failures are reported as WebVTTError with kind IO_FAILURE.
"""

import logging
import re
from typing import Optional, Union

import requests

from .exceptions import ErrorKind, WebVTTError
from .models import Document, ParseConfig
from .parser import WebVTTParser

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30

_URL_RE = re.compile(r'^https?://', re.IGNORECASE)
_LINE_BREAK_RE = re.compile(r'[\r\n]')


def is_url(source: str) -> bool:
    """
    Check if a source is an http(s) URL rather than a file path.

    Example:
        >>> is_url("https://example.com/captions.vtt")
        True
        >>> is_url("captions.vtt")
        False
    """
    return bool(_URL_RE.match(source))


def load_text(source: str, timeout: int = DEFAULT_TIMEOUT) -> str:
    """
    Read the text of a WebVTT file or URL.

    Args:
        source: File path or http(s) URL
        timeout: Request timeout in seconds for URLs (default: 30)

    Returns:
        The text, unchanged

    Raises:
        WebVTTError: IO_FAILURE with the error message as context
    """
    try:
        if is_url(source):
            logger.info(f"Downloading {source}")
            response = requests.get(source, timeout=timeout)
            response.raise_for_status()
            # requests falls back to ISO-8859-1 for text/* without a charset
            return response.content.decode("utf-8")
        with open(source, "r", encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError, requests.RequestException) as e:
        logger.error(f"Failed to read {source}: {str(e)}")
        raise WebVTTError(ErrorKind.IO_FAILURE, str(e), -1, source, details=str(e)) from e


def parse_file(source: str, config: Optional[ParseConfig] = None) -> Document:
    """
    Read and parse a WebVTT file or URL.

    Args:
        source: File path or http(s) URL
        config: Parsing options

    Returns:
        The parsed Document, with source set

    Raises:
        WebVTTError: IO_FAILURE or a grammar error, with source as the
            file name in the message
    """
    return WebVTTParser(config).parse_file(source)


def load_vtt(text_or_source: str, config: Optional[ParseConfig] = None) -> Document:
    """
    Parse WebVTT text, or read and parse a file or URL.

    Text containing a line break is parsed directly; anything else is taken
    to be a file path or URL.

    Example:
        >>> doc = load_vtt("WEBVTT\\n\\n00:00.000 --> 00:02.120\\nHi!")
        >>> len(doc.cues)
        1
    """
    parser = WebVTTParser(config)
    if _LINE_BREAK_RE.search(text_or_source):
        return parser.parse(text_or_source)
    return parser.parse_file(text_or_source)


def write_file(document: Union[Document, str], path: str) -> None:
    """
    Write a document to a file in WebVTT syntax.

    Args:
        document: Document (or already formatted WebVTT text)
        path: Output file path

    Raises:
        WebVTTError: IO_FAILURE if the file cannot be written
    """
    content = str(document)
    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
    except OSError as e:
        logger.error(f"Failed to write {path}: {str(e)}")
        raise WebVTTError(ErrorKind.IO_FAILURE, str(e), -1, path, details=str(e)) from e

    logger.info(f"Saved WebVTT file to {path}")
