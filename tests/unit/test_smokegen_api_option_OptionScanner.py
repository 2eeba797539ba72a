"""Unit tests for smokegen.api.option.OptionScanner module."""

import pytest

from smokegen.api.option.OptionDefinition import OptionDefinition
from smokegen.api.option.OptionKind import OptionKind
from smokegen.api.option.OptionRegistry import OptionRegistry
from smokegen.api.option.OptionScanner import OptionScanner
from tests.conftest import write_manpage

pytestmark = pytest.mark.unit


@pytest.fixture
def registry() -> OptionRegistry:
    return OptionRegistry.build()


def _values(definitions: list[OptionDefinition]) -> list[str]:
    return [d.value for d in definitions]


class TestScanLines:
    """Test OptionScanner.scan_lines on in-memory manual text."""

    def test_option_with_keyword_is_matched(self, registry):
        scanner = OptionScanner(registry, "unused")
        lines = [".It Fl h", "Print a help message.", ".It Fl x", "Something else."]

        assert _values(scanner.scan_lines(lines)) == ["h"]

    def test_option_without_keyword_is_not_matched(self, registry):
        scanner = OptionScanner(registry, "unused")
        lines = [".It Fl v", "Be verbose.", ".It Fl x", "Other."]

        assert scanner.scan_lines(lines) == []

    def test_option_taking_argument_without_keyword_prose(self, registry):
        scanner = OptionScanner(registry, "unused")
        lines = [".It Fl h Ar host", "Connect to", ".Ar host .", ".It Fl q", "Quiet."]

        assert scanner.scan_lines(lines) == []

    def test_multi_word_declaration_uses_leading_token(self, registry):
        scanner = OptionScanner(registry, "unused")
        lines = [".It Fl h Ar topic", "Show help about", ".Ar topic ."]

        assert _values(scanner.scan_lines(lines)) == ["h"]

    def test_last_option_is_closed_at_end_of_section(self, registry):
        scanner = OptionScanner(registry, "unused")
        lines = [".It Fl h", "Show the help.", ".It Fl v", "Show the version."]

        assert _values(scanner.scan_lines(lines)) == ["h", "v"]

    def test_declaration_line_is_not_part_of_description(self, registry):
        scanner = OptionScanner(registry, "unused")
        lines = [".It Fl h help", "Nothing relevant."]

        assert scanner.scan_lines(lines) == []

    def test_description_before_first_declaration_is_ignored(self, registry):
        scanner = OptionScanner(registry, "unused")
        lines = ["This page has help and version text.", ".It Fl h", "Nothing relevant."]

        assert scanner.scan_lines(lines) == []

    def test_keyword_split_across_lines_is_joined_without_separator(self, registry):
        scanner = OptionScanner(registry, "unused")
        lines = [".It Fl h", "Show the he", "lp text."]

        assert _values(scanner.scan_lines(lines)) == ["h"]

    def test_empty_argument_declaration_is_skipped(self, registry):
        scanner = OptionScanner(registry, "unused")
        lines = [".It Fl h", "Show the help.", ".It Fl", "An empty argument.", ".It Fl x", "Other."]

        assert _values(scanner.scan_lines(lines)) == ["h"]

    def test_empty_argument_declaration_registers_nothing(self, registry):
        scanner = OptionScanner(registry, "unused")

        assert scanner.scan_lines([".It Fl", "help version"]) == []

    def test_returns_registry_instances(self, registry):
        scanner = OptionScanner(registry, "unused")
        matched = scanner.scan_lines([".It Fl h", "help"])

        assert matched[0] is registry.get("h")

    def test_redeclared_option_is_matched_again(self, registry):
        scanner = OptionScanner(registry, "unused")
        lines = [".It Fl h", "help", ".It Fl x", "other", ".It Fl h", "more help", ".It Fl y", "other"]

        assert _values(scanner.scan_lines(lines)) == ["h", "h"]

    def test_unconfirmed_option_is_never_rechecked(self, registry):
        scanner = OptionScanner(registry, "unused")
        # "v" stays pending; the "version" prose belongs to "x"
        lines = [".It Fl v", "verbose", ".It Fl x", "print the version"]

        assert scanner.scan_lines(lines) == []

    def test_extra_registry_option(self):
        registry = OptionRegistry.build([OptionDefinition(OptionKind.SHORT, "V", "version")])
        scanner = OptionScanner(registry, "unused")

        assert _values(scanner.scan_lines([".It Fl V", "Print version and exit."])) == ["V"]

    def test_newlines_are_stripped(self, registry):
        scanner = OptionScanner(registry, "unused")
        lines = [".It Fl h\n", "help\n"]

        assert _values(scanner.scan_lines(lines)) == ["h"]


class TestScan:
    """Test OptionScanner.scan on manual source files."""

    def test_scan_date(self, registry, groff_dir):
        scanner = OptionScanner(registry, groff_dir)
        assert _values(scanner.scan("date")) == ["h"]

    def test_scan_echo(self, registry, groff_dir):
        scanner = OptionScanner(registry, groff_dir)
        assert _values(scanner.scan("echo")) == ["h", "v"]

    def test_missing_utility_yields_nothing(self, registry, groff_dir):
        scanner = OptionScanner(registry, groff_dir)
        assert scanner.scan("nonexistent") == []

    def test_missing_groff_dir(self, registry, tmp_path):
        scanner = OptionScanner(registry, tmp_path / "missing")
        assert scanner.scan("date") == []

    def test_section_8_only(self, registry, tmp_path):
        write_manpage(tmp_path, "mount.8", ".It Fl v\nPrint the version.\n")
        scanner = OptionScanner(registry, tmp_path)

        assert _values(scanner.scan("mount")) == ["v"]

    def test_sections_scanned_in_order(self, registry, tmp_path):
        write_manpage(tmp_path, "tool.1", ".It Fl v\nShow version.\n")
        write_manpage(tmp_path, "tool.8", ".It Fl h\nShow help.\n")
        scanner = OptionScanner(registry, tmp_path)

        assert _values(scanner.scan("tool")) == ["v", "h"]

    def test_description_does_not_carry_across_sections(self, registry, tmp_path):
        write_manpage(tmp_path, "tool.1", ".It Fl v\nverbose\n")
        write_manpage(tmp_path, "tool.8", "Prints the version string.\n.It Fl x\nUnrelated.\n")
        scanner = OptionScanner(registry, tmp_path)

        assert scanner.scan("tool") == []

    def test_unconfirmed_name_from_section_1_does_not_block_section_8(self, registry, tmp_path):
        write_manpage(tmp_path, "tool.1", ".It Fl v\nverbose\n")
        write_manpage(tmp_path, "tool.8", ".It Fl h\nShow help.\n")
        scanner = OptionScanner(registry, tmp_path)

        assert _values(scanner.scan("tool")) == ["h"]

    def test_other_sections_ignored(self, registry, tmp_path):
        write_manpage(tmp_path, "tool.5", ".It Fl h\nShow help.\n")
        scanner = OptionScanner(registry, tmp_path)

        assert scanner.scan("tool") == []

    def test_scan_is_idempotent(self, registry, groff_dir):
        scanner = OptionScanner(registry, groff_dir)
        assert scanner.scan("echo") == scanner.scan("echo")

    def test_section_path(self, registry, tmp_path):
        scanner = OptionScanner(registry, tmp_path)
        assert scanner.section_path("date", "1") == tmp_path / "date.1"


class TestArgumentOptions:
    """Test OptionScanner.argument_options and sections_found."""

    def test_date_declares_r_with_argument(self, registry, groff_dir):
        assert OptionScanner(registry, groff_dir).argument_options("date") == ["r"]

    def test_unregistered_options_are_reported(self, registry, tmp_path):
        write_manpage(tmp_path, "tool.1", ".It Fl f Ar fmt\nFormat.\n.It Fl j\nNo argument.\n")
        write_manpage(tmp_path, "tool.8", ".It Fl t Ar west\nZone.\n.It Fl f Ar other\nAgain.\n")

        assert OptionScanner(registry, tmp_path).argument_options("tool") == ["f", "t"]

    def test_optional_argument_is_not_reported(self, registry, tmp_path):
        write_manpage(tmp_path, "tool.1", ".It Fl d Op Ar dst\nDaylight saving.\n")

        assert OptionScanner(registry, tmp_path).argument_options("tool") == []

    def test_missing_manual(self, registry, tmp_path):
        assert OptionScanner(registry, tmp_path).argument_options("tool") == []

    def test_sections_found(self, registry, tmp_path):
        write_manpage(tmp_path, "tool.8", ".It Fl h\nhelp\n")
        scanner = OptionScanner(registry, tmp_path)

        assert scanner.sections_found("tool") == ["8"]
        assert scanner.sections_found("other") == []
