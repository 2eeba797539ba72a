from ..execute.ExecutionResult import ExecutionResult


def _check_stream(result: ExecutionResult) -> str:
    """atf_check flag for the stream the output is expected on.

    Output is captured with stderr merged into stdout; usage and error
    messages go to stderr, so a failing invocation is checked there.
    """
    return "-o" if result.exit_status == 0 else "-e"
