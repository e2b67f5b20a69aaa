"""Tests for request context variables."""

from src.utils.context import (
    clear_all_context,
    generate_correlation_id,
    get_correlation_id,
    get_request_context,
    set_correlation_id,
    set_user_id,
)


class TestRequestContext:
    """Test suite for the request context helpers."""

    def teardown_method(self):
        clear_all_context()

    def test_set_and_get(self):
        set_correlation_id("corr-1")
        set_user_id("user-1")

        assert get_correlation_id() == "corr-1"
        assert get_request_context() == {"correlation_id": "corr-1", "user_id": "user-1"}

    def test_empty_correlation_id_ignored(self):
        set_correlation_id("corr-1")
        set_correlation_id("")

        assert get_correlation_id() == "corr-1"

    def test_generate(self):
        correlation_id = generate_correlation_id()

        assert len(correlation_id) == 36
        assert get_correlation_id() == correlation_id

    def test_clear(self):
        set_correlation_id("corr-1")
        clear_all_context()

        assert get_request_context() == {"correlation_id": None, "user_id": None}
