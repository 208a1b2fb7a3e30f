"""
Unit tests for capability listing parsing.
"""

from modules.capabilities import parse_capability_line, parse_capability_listing


SAMPLE_LISTING = """\
PageSize/Media Size: *Letter A4 Legal
ColorModel/Color Mode: RGB *Gray KGray
print-color-mode/Print Color Mode: *color monochrome
Duplex/2-Sided Printing: *None DuplexNoTumble DuplexTumble
"""


class TestParseCapabilityLine:
    """Single-line parsing."""

    def test_all_choices_without_default(self):
        option = parse_capability_line("ColorModel/Color Mode: RGB Gray KGray")

        assert option.key == "ColorModel/Color Mode"
        assert option.base_key == "ColorModel"
        assert option.values == ("RGB", "Gray", "KGray")
        assert all(not choice.is_default for choice in option.choices)
        assert option.default_value is None

    def test_default_marker_is_stripped(self):
        option = parse_capability_line("ColorModel/Color Mode: RGB *Gray KGray")

        assert option.base_key == "ColorModel"
        assert option.values == ("RGB", "Gray", "KGray")
        assert [c.is_default for c in option.choices] == [False, True, False]
        assert option.default_value == "Gray"

    def test_leading_default(self):
        option = parse_capability_line("ColorModel/Color Mode: *RGB Gray KGray")

        assert option.default_value == "RGB"
        assert option.choices[0].value == "RGB"

    def test_key_without_human_name(self):
        option = parse_capability_line("PrintAsGray: *false true")

        assert option.key == "PrintAsGray"
        assert option.base_key == "PrintAsGray"

    def test_base_key_is_trimmed(self):
        option = parse_capability_line("  HPColorMode /Color:  *Color  Mono  ")

        assert option.base_key == "HPColorMode"
        assert option.values == ("Color", "Mono")

    def test_splits_on_first_colon_only(self):
        option = parse_capability_line("Resolution/Output Resolution: 600dpi *1200dpi x:y")

        assert option.base_key == "Resolution"
        assert option.values == ("600dpi", "1200dpi", "x:y")

    def test_line_without_colon_is_ignored(self):
        assert parse_capability_line("this line has no separator") is None

    def test_line_without_values_is_dropped(self):
        assert parse_capability_line("ColorModel/Color Mode:   ") is None

    def test_blank_line(self):
        assert parse_capability_line("   ") is None


class TestParseCapabilityListing:
    """Whole-listing parsing."""

    def test_parses_every_option_in_order(self):
        options = parse_capability_listing(SAMPLE_LISTING)

        assert [o.base_key for o in options] == [
            "PageSize", "ColorModel", "print-color-mode", "Duplex"
        ]
        assert options[2].default_value == "color"

    def test_no_colon_lines_yields_empty(self):
        assert parse_capability_listing("no colons\nat all\n\n") == []

    def test_empty_and_none(self):
        assert parse_capability_listing("") == []
        assert parse_capability_listing(None) == []

    def test_skips_valueless_lines_between_options(self):
        listing = "ColorModel/Color Mode: *RGB Gray\nBroken/Nothing:\nDuplex: *None"
        options = parse_capability_listing(listing)

        assert [o.base_key for o in options] == ["ColorModel", "Duplex"]

    def test_every_option_has_choices(self):
        for option in parse_capability_listing(SAMPLE_LISTING):
            assert len(option.choices) > 0

    def test_to_dict(self):
        option = parse_capability_line("ColorModel/Color Mode: *Color Gray")

        assert option.to_dict() == {
            "key": "ColorModel/Color Mode",
            "baseKey": "ColorModel",
            "choices": [
                {"value": "Color", "isDefault": True},
                {"value": "Gray", "isDefault": False},
            ],
        }
