from __future__ import annotations

import logging
import os

import pytest
from hypothesis import settings

## Hypothesis profiles

# github-actions tends to have flaky runtimes, likely due to temporary slowdowns in the
# runner, so just disable deadlines
settings.register_profile("pr", deadline=None)
settings.register_profile("dev", max_examples=50)

settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture
def barparse_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """caplog capturing everything logged under ``barparse``"""
    caplog.set_level(logging.DEBUG, logger="barparse")
    return caplog


@pytest.fixture(autouse=True)
def _detach_barparse_handlers():
    """Undo setup_logging() calls made during a test"""
    yield
    logger = logging.getLogger("barparse")
    for handler in list(logger.handlers):
        if handler.get_name() == "barparse-stream":
            logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
