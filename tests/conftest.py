from __future__ import annotations

import pytest

RED = "\x1b[31m"
RESET = "\x1b[0m"


@pytest.fixture
def paragraph() -> str:
    return (
        "Lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do "
        "eiusmod tempor incididunt ut labore et dolore magna aliqua. Ut enim "
        "ad minim veniam, quis nostrud exercitation ullamco laboris."
    )


@pytest.fixture
def red_payload() -> str:
    """Forty visible characters wrapped in a colour code."""
    return RED + "x" * 40 + RESET
