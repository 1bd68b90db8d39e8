#!/usr/bin/env python3
"""
tridinspect Output Parser - TrID report to MatchRecord list

TrID prints one block per candidate, blocks separated by a blank line:

     85.50% (.PDF) Adobe Portable Document Format (5000/1)
            Mime type: application/pdf
           Definition: adobe-pdf.trid.xml

    10.00% (.PS) PostScript

Each block is parsed on its own: a header line, then optional detail lines.
Blocks that do not fit the grammar (banners, summaries, malformed headers)
are skipped rather than reported.

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

import re

from ..domain.results import MatchRecord
from ..utils.logger import get_logger
from .constants import DETAIL_FIELDS

logger = get_logger(__name__)

# "<probability>% (<.ext>) <name>", optionally followed by TrID's score group
# such as "(5000/1)" which is not part of the name.
HEADER_PATTERN = re.compile(
    r"^\s*(?P<probability>[0-9.]*)%\s+"
    r"\((?P<extension>\.[^()]*)\)\s+"
    r"(?P<name>\S.*?)"
    r"(?:\s+\(\d+(?:/\d+)+\))?\s*$"
)

DETAIL_PATTERN = re.compile(
    r"^\s*(?P<key>" + "|".join(re.escape(key) for key in DETAIL_FIELDS) + r")\s*:\s*(?P<value>.*?)\s*$"
)

BLOCK_SEPARATOR = re.compile(r"\n[ \t]*\n")


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def split_blocks(text: str) -> list[str]:
    """Split a report into candidate blocks on blank lines."""
    return [block for block in BLOCK_SEPARATOR.split(normalize_newlines(text)) if block.strip()]


def parse_probability(raw: str) -> float | None:
    """Return the numeric probability, or None for an empty or invalid field."""
    value = raw.replace("%", "").strip()
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def parse_block(block: str) -> MatchRecord | None:
    """
    Parse one candidate block.

    Args:
        block: Text of a single block, newlines already normalized

    Returns:
        MatchRecord, or None when the block has no usable header
    """
    lines = block.split("\n")

    for index, line in enumerate(lines):
        header = HEADER_PATTERN.match(line)
        if header:
            break
    else:
        return None

    probability = parse_probability(header.group("probability"))
    if probability is None:
        logger.debug(f"Skipping block with invalid probability: {line.strip()!r}")
        return None

    details: dict[str, str] = {}
    for detail_line in lines[index + 1 :]:
        detail = DETAIL_PATTERN.match(detail_line)
        if detail:
            details[DETAIL_FIELDS[detail.group("key")]] = detail.group("value")

    return MatchRecord(
        extension=header.group("extension").lower(),
        probability=probability,
        name=header.group("name"),
        **details,
    )


def parse_output(output: str) -> list[MatchRecord]:
    """
    Parse a TrID report into match records, in the order TrID printed them.

    Never raises on malformed input; unusable blocks are dropped.
    """
    records = []
    for block in split_blocks(output):
        record = parse_block(block)
        if record is None:
            continue
        records.append(record)

    logger.debug(f"Parsed {len(records)} match(es) from TrID output")
    return records
