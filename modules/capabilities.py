"""
Capability Listing Parser

Turns a printer's long-form option listing into CapabilityOption records.
The listing has one option per line:

    ColorModel/Color Mode: *RGB Gray KGray
    print-color-mode/Print Color Mode: *color monochrome

Everything left of the first colon is the option key (optionally followed
by '/Human Readable Name'); everything right of it is a whitespace-separated
list of values, with the current default marked by a leading '*'.
"""

from typing import List, Optional

from models.capability import CapabilityOption, OptionChoice


DEFAULT_MARKER = "*"


def parse_capability_line(line: str) -> Optional[CapabilityOption]:
    """
    Parse a single listing line.

    Args:
        line: One line of the listing

    Returns:
        CapabilityOption, or None if the line has no colon or no values
    """
    line = line.strip()
    if not line or ":" not in line:
        return None

    lhs, rhs = line.split(":", 1)
    key = lhs.strip()
    base_key = key.split("/", 1)[0].strip()

    choices = tuple(
        OptionChoice(
            value=token[len(DEFAULT_MARKER):] if token.startswith(DEFAULT_MARKER) else token,
            is_default=token.startswith(DEFAULT_MARKER),
        )
        for token in rhs.split()
    )
    if not choices:
        return None

    return CapabilityOption(key=key, base_key=base_key, choices=choices)


def parse_capability_listing(text: Optional[str]) -> List[CapabilityOption]:
    """
    Parse a full capability listing.

    Lines without a colon-delimited value list are skipped silently, so an
    empty or unrecognized listing yields an empty list.

    Args:
        text: Raw listing output (may be None or empty)

    Returns:
        Options in listing order
    """
    if not text:
        return []

    options = []
    for line in text.splitlines():
        option = parse_capability_line(line)
        if option is not None:
            options.append(option)
    return options
