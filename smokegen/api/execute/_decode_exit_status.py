def _decode_exit_status(returncode: int) -> int:
    """Convert a Popen return code into a shell-style exit status.

    A child killed by signal N reports ``128 + N`` (143 for SIGTERM),
    so forced termination never looks like success.
    """
    if returncode < 0:
        return 128 - returncode
    return returncode
