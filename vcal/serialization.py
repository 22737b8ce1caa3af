"""Text serialization for calendar components.

The format is a simplified iCalendar layout::

    BEGIN:VCALENDAR
    PRODID:...
    BEGIN:VEVENT
    SUMMARY:...
    END:VEVENT
    END:VCALENDAR

Every line ends with CRLF. Values are written verbatim: no folding and no
escaping.

Parsing goes through a line scanner that tracks nesting depth, producing a
tree of :class:`Block` objects. Components then load their own state from
the block (see ``VObject._load_block``). Scanning never raises: lines
without a ``:`` separator are skipped.
"""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from vcal.models.component import VObject

logger = logging.getLogger(__name__)

CRLF = "\r\n"


@dataclass
class Block:
    """One BEGIN/END section of scanned text."""

    type: str | None = None
    properties: list[tuple[str, str]] = field(default_factory=list)
    children: list["Block"] = field(default_factory=list)


def serialize(component: "VObject") -> str:
    """Serialize a component and its children to text."""
    lines = [f"BEGIN:{component.type()}{CRLF}"]

    # unset properties are not written
    for name, value in component.properties().items():
        if value is not None:
            lines.append(f"{name}:{value}{CRLF}")

    for child in component.children():
        lines.append(serialize(child))

    lines.append(f"END:{component.type()}{CRLF}")
    return "".join(lines)


def scan(text: str) -> Block:
    """Scan serialized text into a tree of blocks.

    The returned root block holds the lines of the outermost component
    (plus any property lines outside a BEGIN/END pair). Each BEGIN after
    the root's own opens a child block which runs to its matching END, or
    to the end of the input if the END is missing.
    """
    root = Block()
    stack = [root]
    opened = False

    for number, raw in enumerate(text.split("\n"), start=1):
        line = raw[:-1] if raw.endswith("\r") else raw
        if not line:
            continue

        name, sep, value = line.partition(":")
        if not sep:
            logger.debug(f"Skipping line {number} without separator: {line!r}")
            continue

        if name == "BEGIN":
            if not opened:
                root.type = value
                opened = True
            else:
                child = Block(type=value)
                stack[-1].children.append(child)
                stack.append(child)
        elif name == "END":
            # the root's own END (or a stray one) leaves depth unchanged
            if len(stack) > 1:
                stack.pop()
        else:
            stack[-1].properties.append((name, value))

    if len(stack) > 1:
        logger.debug(f"Input ended inside {len(stack) - 1} unterminated block(s)")

    return root
