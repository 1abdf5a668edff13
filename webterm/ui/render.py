"""
Rendering of transcript lines for a rich console.

Output text carries two conventions the core never interprets: ANSI color
directives (green, gray, red) and ``[utilizza:<name>]`` entity controls.
"""

from __future__ import annotations

import re

from rich.text import Text

_ANSI_STYLES = {
    "1;32": "ansi.green",
    "2;37": "ansi.gray",
    "1;31": "ansi.red",
}

_TOKEN = re.compile(
    r"\x1b\[(?P<code>1;32|2;37|1;31)m(?P<colored>.*?)\x1b\[0m"
    r"|\[utilizza:(?P<entity>[^\]\s]+)\]",
    re.DOTALL,
)

_ENTITY_CONTROL = re.compile(r"\[utilizza:([^\]\s]+)\]")


def entity_controls(text: str) -> list[str]:
    """Names of the entity controls embedded in ``text``, in order."""
    return _ENTITY_CONTROL.findall(text)


def render_line(line: str) -> Text:
    """
    Convert a transcript line to styled rich text.

    Color directives become theme styles; entity controls become a hint for
    the ``:use <name>`` console command.

    Args:
        line: Raw transcript line

    Returns:
        Styled text with all directives removed
    """
    text = Text()
    position = 0
    for match in _TOKEN.finditer(line):
        text.append(line[position : match.start()])
        if match.group("entity"):
            text.append(f"[:use {match.group('entity')}]", style="entity.control")
        else:
            text.append(match.group("colored"), style=_ANSI_STYLES[match.group("code")])
        position = match.end()
    text.append(line[position:])
    return text
