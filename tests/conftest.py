from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tests._fixtures.project_builder import ProjectBuilder


@pytest.fixture
def project(tmp_path: Path) -> ProjectBuilder:
    """Provide a package skeleton with empty src/ and dist/ directories."""
    return ProjectBuilder(tmp_path)


@pytest.fixture(autouse=True)
def _reset_xportify_logger():
    """Drop handlers installed by configure_logging so they never outlive capture."""
    yield
    logger = logging.getLogger("xportify")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
