"""Shared test configuration."""

from collections.abc import Callable
from pathlib import Path

import pytest

from ght.testing.conftest import (  # noqa: F401
    mock_client,
    mock_client_missing_repo,
    repo_options,
    write_template,
)

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixture_path() -> Callable[[str], str]:
    """Provide a function returning the path of a template under tests/fixtures."""

    def _path(name: str) -> str:
        return str(FIXTURES / name)

    return _path
