import shlex

from ...templating import shquote
from ..execute.ExecutionResult import ExecutionResult
from ._check_stream import _check_stream


def format_atf_check(utility: str, args: str, result: ExecutionResult) -> str:
    """One ``atf_check`` line asserting the observed status and output of ``utility args``.

    The utility is quoted the same way ``build_command`` quotes it, so the
    script re-runs exactly what was observed.
    """
    invocation = f"{shlex.quote(utility)} {args}" if args else shlex.quote(utility)
    status = f"-s exit:{result.exit_status}"
    if not result.captured_output:
        return f"atf_check {status} -o empty {invocation}"
    return f"atf_check {status} {_check_stream(result)} inline:{shquote(result.captured_output)} {invocation}"
