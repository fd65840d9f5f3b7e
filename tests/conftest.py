"""Pytest configuration and shared fixtures."""

import os

from hypothesis import settings

# Share links in tests use the built-in defaults.
for _name in ("URL_STATE_BASE_URL", "URL_STATE_PREVIEW_LENGTH"):
    os.environ.pop(_name, None)

# Create a profile named "no_deadline" with deadline disabled.
settings.register_profile("no_deadline", deadline=None)
settings.load_profile("no_deadline")
