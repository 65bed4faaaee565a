from __future__ import annotations

import pytest

from simple_unicode_normalization_forms.logging_config import setup_logging


@pytest.fixture(autouse=True)
def _reset_sunf_logging():
    # CLI invocations bind log handlers to CliRunner's temporary stderr; reset
    # afterwards so later tests don't log into a closed stream.
    yield
    setup_logging("WARNING")
