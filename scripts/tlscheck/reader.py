"""Domain list ingestion from files or stdin.

A line may hold one or several domains separated by commas or whitespace::

    domain.ru
    domain2.ru,www.domain2.ru
"""

import logging
import re
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

logger = logging.getLogger(__name__)

SEPARATORS = re.compile(r"[\s,]+")


def split_domains(lines: Iterable[str]) -> Iterator[str]:
    """Yield non-empty domain tokens from lines of text."""
    for line in lines:
        for token in SEPARATORS.split(line):
            if token:
                yield token


def read_stream(stream: TextIO) -> Iterator[str]:
    yield from split_domains(stream)


def read_files(paths: Iterable[str]) -> Iterator[str]:
    """Yield domains from each file in order.

    A file that cannot be opened or read is logged and skipped.
    """
    for path in paths:
        try:
            with open(path, encoding="utf-8") as f:
                logger.info(f"Reading file '{path}'")
                yield from split_domains(f)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Can't read input file '{path}': {e}")


def read_domains(paths: list[str]) -> Iterator[str]:
    """Domains from the named files, or from stdin when none are given."""
    if paths:
        return read_files(paths)
    logger.info("Reading domains from stdin")
    return read_stream(sys.stdin)
