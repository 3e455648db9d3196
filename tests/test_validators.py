import pytest

from Analyzer.Routes.validators import validate_url_param, validate_proxy_payload, error_body, empty_technologies


def test_validate_url_param_valid():
    assert validate_url_param({"url": " https://github.com/o/r "}) == "https://github.com/o/r"


@pytest.mark.parametrize("args", [{}, {"url": ""}, {"url": "   "}, {"url": 5}])
def test_validate_url_param_missing(args):
    with pytest.raises(ValueError):
        validate_url_param(args)


def test_validate_proxy_payload():
    url, endpoint = validate_proxy_payload({"url": "https://github.com/o/r", "endpoint": "info"})
    assert url == "https://github.com/o/r"
    assert endpoint == "info"
    with pytest.raises(ValueError):
        validate_proxy_payload({"url": "https://github.com/o/r"})


def test_error_body_never_has_empty_message():
    assert error_body("internal_error", "")["message"]
    body = error_body("not_found", "gone", **empty_technologies())
    assert body["technologies"] == []
    assert body["packageDetails"]["devDependencies"] == {}
