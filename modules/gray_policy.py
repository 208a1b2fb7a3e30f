"""
Grayscale Policy Selector

Chooses the printer option/value pair that forces monochrome output.

Printer drivers expose inconsistent names for the same switch: IPP printers
advertise print-color-mode, PPD-based drivers use ColorModel, and vendors
add their own (HPColorMode, BRMonoColor, XeroxColor, ...). Selection is a
ranked best-effort match against the tables below; extending support for a
new driver means adding a row, not a branch.

Tables:
    COLOR_KEY_HINTS        - substrings identifying color/mono option keys
    PREFERRED_GRAY_VALUES  - grayscale value names, most preferred first
    RANK_RULES             - key predicates and their rank (lower wins)
    FALLBACK_GRAY_OPTIONS  - sent together when nothing could be selected
"""

from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Tuple

from models.capability import CapabilityOption
from models.print_result import GraySelection
from logging_config import get_logger


logger = get_logger(__name__)


# Keys that commonly control color/mono, matched as lowercase substrings
COLOR_KEY_HINTS: Tuple[str, ...] = (
    "print-color-mode",
    "colormodel",
    "colormode",
    "colormgmt",
    "processcolormodel",
    "outputmode",
    "color",
    "ap_colormode",
    "hpcolormode",
    "brmonocolor",
    "cmcolormode",
    "xeroxcolor",
    "epcolormode",
    "printasgray",
)

# Grayscale value names, most preferred first
PREFERRED_GRAY_VALUES: Tuple[str, ...] = (
    "Gray",
    "KGray",
    "DeviceGray",
    "Grayscale",
    "Mono",
    "Monochrome",
    "Black",
    "Gray16",
    "DeviceGray16",
    "B&W",
    "BW",
    "BlackWhite",
)

IPP_COLOR_MODE_KEY = "print-color-mode"
IPP_MONOCHROME_VALUE = "monochrome"

FIT_TO_PAGE_OPTION = "fit-to-page"


@dataclass(frozen=True)
class RankRule:
    """A key predicate and the rank given to options it matches."""

    name: str
    predicate: Callable[[str], bool]
    rank: int


# First matching rule wins; unmatched keys get DEFAULT_RANK
RANK_RULES: Tuple[RankRule, ...] = (
    RankRule("ipp-color-mode", lambda key: IPP_COLOR_MODE_KEY in key, 0),
    RankRule("ppd-color-model", lambda key: "colormodel" in key, 1),
)
DEFAULT_RANK = 2

# Sent together when no targeted selection exists. Print systems ignore
# options a driver does not recognize.
FALLBACK_GRAY_OPTIONS: Tuple[GraySelection, ...] = (
    GraySelection(IPP_COLOR_MODE_KEY, IPP_MONOCHROME_VALUE),  # IPP Everywhere
    GraySelection("ColorModel", "Gray"),                      # Common PPD
    GraySelection("ColorModel", "KGray"),                     # Some PPDs
    GraySelection("PrintAsGray", "true"),                     # Some drivers
    GraySelection("ColorMode", "Monochrome"),                 # Alt spelling
)


def is_color_option(option: CapabilityOption, hints: Iterable[str] = COLOR_KEY_HINTS) -> bool:
    """True if the option's base key looks like a color/mono control."""
    key = option.base_key.lower()
    return any(hint in key for hint in hints)


def rank_for_key(base_key: str, rules: Iterable[RankRule] = RANK_RULES) -> int:
    """Rank of an option key according to the rule table (lower is better)."""
    key = base_key.lower()
    for rule in rules:
        if rule.predicate(key):
            return rule.rank
    return DEFAULT_RANK


def preferred_gray_value(
    option: CapabilityOption,
    preferred: Tuple[str, ...] = PREFERRED_GRAY_VALUES
) -> Optional[Tuple[int, str]]:
    """
    Find the most preferred grayscale value the option offers.

    Matching is case-insensitive; the value is returned in the printer's own
    spelling since print systems compare values exactly.

    Returns:
        (preference_index, value) or None if the option has no gray value
    """
    offered = {}
    for value in option.values:
        offered.setdefault(value.lower(), value)

    for index, name in enumerate(preferred):
        value = offered.get(name.lower())
        if value is not None:
            return index, value
    return None


def select_gray_option(options: List[CapabilityOption]) -> Optional[GraySelection]:
    """
    Pick the single best option/value pair for monochrome output.

    1. Keep options whose key contains a known color-control hint.
    2. For each, take its most preferred grayscale value.
    3. Score by (key rank, value preference); the first of equal scores wins.
    4. With no match, fall back to print-color-mode=monochrome if the printer
       advertises print-color-mode at all.

    Args:
        options: Parsed capability listing (may be empty)

    Returns:
        GraySelection, or None if nothing suitable was found
    """
    best: Optional[Tuple[Tuple[int, int], GraySelection]] = None

    for option in options:
        if not is_color_option(option):
            continue

        found = preferred_gray_value(option)
        if found is None:
            continue

        preference_index, value = found
        score = (rank_for_key(option.base_key), preference_index)
        if best is None or score < best[0]:
            best = (score, GraySelection(option.base_key, value))

    if best is not None:
        logger.debug(f"Selected {best[1].as_lp_option()} (score {best[0]})")
        return best[1]

    if any(IPP_COLOR_MODE_KEY in option.base_key.lower() for option in options):
        logger.debug("No gray value advertised; using IPP print-color-mode fallback")
        return GraySelection(IPP_COLOR_MODE_KEY, IPP_MONOCHROME_VALUE)

    return None


def build_print_options(selection: Optional[GraySelection]) -> List[str]:
    """
    Assemble the print command options for one attempt.

    Args:
        selection: Targeted selection, or None to send every fallback

    Returns:
        Ordered 'key=value' / flag strings, always ending with fit-to-page
    """
    if selection is not None:
        options = [selection.as_lp_option()]
    else:
        options = [fallback.as_lp_option() for fallback in FALLBACK_GRAY_OPTIONS]
    options.append(FIT_TO_PAGE_OPTION)
    return options
