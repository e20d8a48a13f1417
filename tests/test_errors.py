import pytest

from finance_tracker.services.errors import (
    AggregatorError,
    get_safe_error_message,
    upstream_action,
)


@pytest.mark.parametrize(
    ("status_code", "message"),
    [
        (401, "Authentication error. Please check your credentials."),
        (403, "Authentication error. Please check your credentials."),
        (404, "Resource not found."),
        (429, "Too many requests. Please try again later."),
        (500, "External service error. Please try again later."),
        (503, "External service error. Please try again later."),
        (400, "An error occurred. Please try again."),
        (None, "An error occurred. Please try again."),
    ],
)
def test_safe_error_message(status_code, message):
    assert get_safe_error_message(status_code) == message


def test_upstream_action_tags_aggregator_errors():
    with pytest.raises(AggregatorError) as exc_info:
        with upstream_action("Unable to fetch accounts"):
            raise AggregatorError("boom", status_code=429)
    assert exc_info.value.action == "Unable to fetch accounts"
    assert exc_info.value.status_code == 429
    assert exc_info.value.detail == "boom"


def test_upstream_action_leaves_other_errors_alone():
    with pytest.raises(ValueError):
        with upstream_action("Unable to fetch accounts"):
            raise ValueError("not ours")


def test_aggregator_error_default_detail():
    assert AggregatorError().detail == "Aggregator request failed"
