"""Unit tests for runtime utilities in runtime.py.

Test coverage includes:

1. running_locally() behavior
"""

import pytest

from urlshortener.utils.runtime import running_locally
from urlshortener.constants import ENV


@pytest.mark.parametrize(
    'app_env, expected',
    [
        (None, False),
        ('', False),
        ('local', True),
        ('LOCAL', True),
        ('dev', False),
        ('prod', False),
    ],
)
def test_running_locally(monkeypatch, app_env, expected):
    """running_locally() evaluates local execution correctly."""
    if app_env is None:
        monkeypatch.delenv(ENV.App.APP_ENV, raising=False)
    else:
        monkeypatch.setenv(ENV.App.APP_ENV, app_env)

    assert running_locally() is expected
