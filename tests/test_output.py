"""Tests for user-facing output routing."""

from unittest.mock import patch

import pytest

from bashbeatz.core import output


@pytest.fixture(autouse=True)
def reset_ui_mode():
    yield
    output.clear_ui_mode()


def test_log_prints_outside_ui_mode() -> None:
    with patch("bashbeatz.core.output.safe_print") as mock_print:
        output.log("Fetching catalog")
    mock_print.assert_called_once_with("Fetching catalog", style="white")


def test_log_routes_to_status_callback_in_ui_mode() -> None:
    received = []
    output.set_ui_mode(lambda message, style: received.append((message, style)))

    with patch("bashbeatz.core.output.safe_print") as mock_print:
        output.log("Error in fetching music data", "error")

    assert received == [("Error in fetching music data", "red")]
    mock_print.assert_not_called()
