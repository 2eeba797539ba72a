import shlex


def build_command(utility: str, *args: str) -> str:
    """Shell command running ``utility`` with ``args``, stderr folded into the captured stdout."""
    return " ".join([shlex.quote(utility), *args, "2>&1"])
