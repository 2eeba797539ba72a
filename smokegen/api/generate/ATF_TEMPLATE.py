# atf-sh test program; one test case per observed option, then the usage checks
ATF_TEMPLATE = """\
#
# Generated by smokegen {{ version }}.
# Verifies the observed behaviour of {{ utility }}.
#

{% for case in cases %}
atf_test_case {{ case.name }}
{{ case.name }}_head()
{
	atf_set "descr" "Verify the usage of option '{{ case.option.value }}'"
}

{{ case.name }}_body()
{
	{{ case.check }}
}

{% endfor %}
{% if invalid_usage %}
atf_test_case invalid_usage
invalid_usage_head()
{
	atf_set "descr" "Verify that an invalid usage with a supported option produces a valid error message"
}

invalid_usage_body()
{
{% for usage in invalid_usage %}
	{{ usage.check }}
{% endfor %}
}

{% endif %}
{% if no_arguments %}
atf_test_case no_arguments
no_arguments_head()
{
	atf_set "descr" "Verify that {{ utility }} executes successfully and produces a valid output when invoked without any arguments"
}

no_arguments_body()
{
	{{ no_arguments.check }}
}

{% endif %}
atf_init_test_cases()
{
{% for case in cases %}
	atf_add_test_case {{ case.name }}
{% endfor %}
{% if invalid_usage %}
	atf_add_test_case invalid_usage
{% endif %}
{% if no_arguments %}
	atf_add_test_case no_arguments
{% endif %}
}
"""
