"""Option discovery scanner for mdoc manual pages."""

import logging
from collections.abc import Iterable
from pathlib import Path

from ...constants import SUPPORTED_SECTIONS
from ._declares_argument import _declares_argument
from ._extract_option_name import _extract_option_name
from ._ScanState import _ScanState
from .OPTION_MARKER import OPTION_MARKER
from .OptionDefinition import OptionDefinition
from .OptionRegistry import OptionRegistry

logger = logging.getLogger(__name__)


class OptionScanner:
    """Find the registry options a utility declares in its manual page.

    Manual pages are a loose stream of "declare option, describe it, declare
    the next one". An option is confirmed once its description contains the
    registry keyword; confirmed names are retired from the pending list so the
    same declaration is never reported twice.
    """

    def __init__(
        self,
        registry: OptionRegistry,
        groff_dir: Path | str,
        sections: Iterable[str] = SUPPORTED_SECTIONS,
    ):
        self.registry = registry
        self.groff_dir = Path(groff_dir)
        self.sections = tuple(sections)

    def section_path(self, utility: str, section: str) -> Path:
        """Manual source file for one section, e.g. ``groff/date.1``."""
        return self.groff_dir / f"{utility}.{section}"

    def scan(self, utility: str) -> list[OptionDefinition]:
        """Scan every supported section of ``utility``'s manual page.

        Missing section files are skipped.

        Returns:
            Matched option definitions, in order of declaration across sections
        """
        pending: list[str] = []
        matched: list[OptionDefinition] = []

        for section in self.sections:
            lines = self._read_section(utility, section)
            if lines is None:
                continue
            self._scan_section(lines, pending, matched)
            logger.debug(f"Scanned section {section} of {utility}: {len(matched)} option(s) matched so far")

        logger.info(f"{utility}: matched {[d.value for d in matched]}")
        return matched

    def sections_found(self, utility: str) -> list[str]:
        """Supported sections with a manual source file for ``utility``."""
        return [s for s in self.sections if self.section_path(utility, s).is_file()]

    def argument_options(self, utility: str) -> list[str]:
        """Names of options declared with a required argument, e.g. ``f`` for ``.It Fl f Ar fmt``.

        Every declaration counts, whether or not the option is in the registry.
        Each name is reported once, in order of first declaration.
        """
        names: list[str] = []
        for section in self.sections:
            for line in self._read_section(utility, section) or ():
                marker_index = line.find(OPTION_MARKER)
                if marker_index == -1:
                    continue
                name = _extract_option_name(line, marker_index)
                if name is not None and name not in names and _declares_argument(line, marker_index):
                    names.append(name)
        return names

    def _read_section(self, utility: str, section: str) -> list[str] | None:
        path = self.section_path(utility, section)
        try:
            with path.open(encoding="utf-8", errors="replace") as fh:
                return fh.readlines()
        except OSError as exc:
            logger.debug(f"Skipping section {section} of {utility}: {exc}")
            return None

    def scan_lines(self, lines: Iterable[str]) -> list[OptionDefinition]:
        """Scan a single section given as lines of text."""
        matched: list[OptionDefinition] = []
        self._scan_section(lines, [], matched)
        return matched

    def _scan_section(self, lines: Iterable[str], pending: list[str], matched: list[OptionDefinition]) -> None:
        state = _ScanState.AWAITING_DECLARATION
        description: list[str] = []

        for raw_line in lines:
            line = raw_line.rstrip("\n")
            marker_index = line.find(OPTION_MARKER)

            if marker_index == -1:
                if state is _ScanState.BUFFERING_DESCRIPTION:
                    description.append(line)
                continue

            name = _extract_option_name(line, marker_index)
            if name is None:
                logger.debug(f"Ignoring empty option declaration: {line!r}")
                continue

            self._close_out(pending, description, matched)
            pending.append(name)
            description.clear()
            state = _ScanState.BUFFERING_DESCRIPTION

        # End of section closes the last option's description
        if state is _ScanState.BUFFERING_DESCRIPTION:
            self._close_out(pending, description, matched)

    def _close_out(self, pending: list[str], description: list[str], matched: list[OptionDefinition]) -> None:
        """Confirm the most recently declared option if its description has the keyword."""
        if not pending:
            return

        definition = self.registry.get(pending[-1])
        if definition is not None and definition.keyword in "".join(description):
            matched.append(definition)
            pending.pop()
