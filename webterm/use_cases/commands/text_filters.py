"""
Text filters that read the output of a previous pipeline stage.

Each filter takes the stage arguments and the piped text; invoked standalone
they receive an empty string.
"""

import re
from typing import Optional, Sequence

from webterm.exceptions import MissingOperandError

DEFAULT_LINE_COUNT = 10

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_count(args: Sequence[str]) -> int:
    """Line count for head/tail: 10 when absent, leading integer otherwise.

    Arguments without a leading integer count as zero lines.
    """
    if not args or not args[0]:
        return DEFAULT_LINE_COUNT
    count = _leading_int(args[0])
    return 0 if count is None else count


def _leading_int(text: str) -> Optional[int]:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


def grep(args: Sequence[str], text: str) -> str:
    """Keep the lines of ``text`` containing the pattern (plain substring)."""
    if not args:
        raise MissingOperandError("grep: pattern mancante")
    pattern = args[0]
    return "\n".join(line for line in text.split("\n") if pattern in line)


def wc(args: Sequence[str], text: str) -> str:
    """Count non-blank lines, whitespace separated words and characters."""
    lines = [line for line in text.split("\n") if line.strip()]
    words = [word for word in re.split(r"\s+", text) if word]
    return f"{len(lines)}   {len(words)}   {len(text)}"


def head(args: Sequence[str], text: str) -> str:
    """First n lines; a negative n drops the last |n| lines."""
    count = _parse_count(args)
    return "\n".join(text.split("\n")[:count])


def tail(args: Sequence[str], text: str) -> str:
    """Last n lines; a negative n drops the first |n| lines."""
    count = _parse_count(args)
    if count == 0:
        return ""
    return "\n".join(text.split("\n")[-count:])
