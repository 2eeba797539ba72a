from .OPTION_MARKER import OPTION_MARKER


def _extract_option_name(line: str, marker_index: int) -> str | None:
    """Extract the short option name declared after the marker at ``marker_index``.

    Multi-word declarations such as ``.It Fl r Ar seconds`` yield only the
    leading token (``r``). Returns None when nothing follows the marker,
    which happens for utilities declaring an empty argument (e.g. tset(1)).
    """
    start = marker_index + len(OPTION_MARKER) + 1
    if start >= len(line):
        return None

    # Search from the second character so a name is never empty
    space_index = line.find(" ", start + 1)
    name = line[start:space_index] if space_index != -1 else line[start:]
    return name.strip() or None
