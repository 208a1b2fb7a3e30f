"""
Printer capability data models.

These models represent one printer's advertised option set as reported by
the print system's long-form option listing, e.g.:

    ColorModel/Color Mode: *RGB Gray KGray
    PageSize/Media Size: *Letter A4 Legal

Both classes are frozen so a parsed listing can be shared between the
policy selector and log output without copying.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Any, Optional, Tuple


@dataclass(frozen=True)
class OptionChoice:
    """A single allowed value for a printer option."""

    value: str
    """Value as accepted by the print command (default marker removed)."""

    is_default: bool = False
    """True if the listing marked this value with a leading '*'."""

    def to_dict(self) -> Dict[str, Any]:
        return {"value": self.value, "isDefault": self.is_default}


@dataclass(frozen=True)
class CapabilityOption:
    """
    One advertised printer option.

    Invariant: choices is never empty. Listing lines without values are
    dropped by the parser rather than represented here.
    """

    key: str
    """Full identifier as advertised, e.g. 'ColorModel/Color Mode'."""

    base_key: str
    """Identifier without the human-readable suffix, e.g. 'ColorModel'."""

    choices: Tuple[OptionChoice, ...]
    """Allowed values in listing order."""

    @property
    def values(self) -> Tuple[str, ...]:
        """Choice values in listing order."""
        return tuple(choice.value for choice in self.choices)

    @property
    def default_value(self) -> Optional[str]:
        """Currently selected value, or None if the listing marks none."""
        for choice in self.choices:
            if choice.is_default:
                return choice.value
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON responses and logging."""
        return {
            "key": self.key,
            "baseKey": self.base_key,
            "choices": [c.to_dict() for c in self.choices],
        }
