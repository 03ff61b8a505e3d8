import pytest

from clusterbot.params import build_job_params, parse_parameter_value


@pytest.mark.parametrize(
    "params, expected",
    [
        ("", {}),
        ('"KEY1=VALUE1"', {"KEY1": "VALUE1"}),
        ("\u201cKEY1=VALUE1\u201d", {"KEY1": "VALUE1"}),
        ('"KEY1=<http://abc123.com|VALUE1>"', {"KEY1": "VALUE1"}),
    ],
    ids=["NoParameters", "SimpleParameter", "IncorrectlyQuotedParameter", "MarkDownLinkParameter"],
)
def test_build_job_params(params, expected):
    assert build_job_params(params) == expected


def test_build_job_params_incorrectly_delimited():
    with pytest.raises(ValueError) as excinfo:
        build_job_params('"KEY1:VALUE1"')
    assert str(excinfo.value) == (
        "unable to interpret `KEY1:VALUE1` as a parameter. "
        "Please ensure that all parameters are in the form of KEY=VALUE"
    )


def test_build_job_params_requires_quotes():
    with pytest.raises(ValueError, match="double quotes"):
        build_job_params("KEY1=VALUE1")


def test_build_job_params_multiple():
    got = build_job_params('"A=1","B=<http://abc123.com|two>"')
    assert got == {"A": "1", "B": "two"}


def test_build_job_params_rejects_extra_equals():
    with pytest.raises(ValueError, match="KEY=VALUE"):
        build_job_params('"A=1=2"')


@pytest.mark.parametrize(
    "value, expected",
    [
        ("", ""),
        ("VALUE1", "VALUE1"),
        ("<http://abc123.com|VALUE1>", "VALUE1"),
    ],
    ids=["NoValue", "SimpleValue", "MarkDownLinkValue"],
)
def test_parse_parameter_value(value, expected):
    assert parse_parameter_value(value) == expected


def test_parse_parameter_value_without_pipe_is_unchanged():
    assert parse_parameter_value("<http://abc123.com>") == "<http://abc123.com>"