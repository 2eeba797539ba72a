from collections.abc import Sequence

from ...templating import render_template
from ...utils.get_package_version import get_package_version
from .ATF_TEMPLATE import ATF_TEMPLATE
from .TestCase import TestCase
from .UsageCheck import UsageCheck


def render_test_script(
    utility: str,
    cases: Sequence[TestCase],
    invalid_usage: Sequence[UsageCheck] = (),
    no_arguments: UsageCheck | None = None,
) -> str:
    """Render an atf-sh test program for ``utility``.

    Args:
        utility: Utility under test
        cases: Observed option invocations, one test case each
        invalid_usage: Options run without their required argument, one check each
        no_arguments: Observed bare invocation, if any

    Returns:
        Script text
    """
    return render_template(
        ATF_TEMPLATE,
        {
            "utility": utility,
            "cases": list(cases),
            "invalid_usage": list(invalid_usage),
            "no_arguments": no_arguments,
            "version": get_package_version(),
        },
    )
