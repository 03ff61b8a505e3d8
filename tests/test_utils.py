import pytest

from clusterbot.utils import params_from_annotation, strip_links


def test_strip_links_uses_label():
    assert strip_links("<https://example.com|4.18>") == "4.18"


def test_strip_links_without_label_keeps_target():
    assert strip_links("use <https://example.com> now") == "use https://example.com now"


def test_strip_links_multiple_links():
    text = "<https://example.com/a|a>,<https://example.com/b|b>"
    assert strip_links(text) == "a,b"


def test_strip_links_plain_text_unchanged():
    for text in ["4.18,openshift/installer#7160", "a < b", "a > b", ""]:
        assert strip_links(text) == text


def test_strip_links_pipe_after_close_is_not_a_label():
    assert strip_links("<x>|y>") == "x|y>"


def test_strip_links_is_idempotent():
    once = strip_links("pre <https://example.com|label> post")
    assert strip_links(once) == once


def test_params_empty_string():
    assert params_from_annotation("") == {}


def test_params_keys_and_values():
    assert params_from_annotation("gcp,test=e2e") == {"gcp": "", "test": "e2e"}


def test_params_key_is_trimmed_value_is_not():
    assert params_from_annotation(" key = v") == {"key": " v"}


def test_params_value_may_contain_equals():
    assert params_from_annotation("a=b=c") == {"a": "b=c"}


def test_params_empty_item_raises():
    with pytest.raises(ValueError, match="parameter may not be empty"):
        params_from_annotation("a,,b")


def test_params_empty_name_raises():
    with pytest.raises(ValueError, match="parameter name may not be empty"):
        params_from_annotation("=value")


def test_params_blank_name_raises():
    with pytest.raises(ValueError, match="parameter name may not be empty"):
        params_from_annotation("a,  =x")