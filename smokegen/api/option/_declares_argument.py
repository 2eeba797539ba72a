from .OPTION_MARKER import OPTION_MARKER


def _declares_argument(line: str, marker_index: int) -> bool:
    """Whether the declaration at ``marker_index`` gives the option a required argument.

    ``.It Fl f Ar fmt`` declares one; ``.It Fl d Op Ar dst`` makes it optional.
    """
    tokens = line[marker_index + len(OPTION_MARKER) :].split()
    if "Ar" not in tokens[1:]:
        return False
    first = tokens.index("Ar", 1)
    return tokens[first - 1] != "Op"
