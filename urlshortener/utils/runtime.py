"""Runtime utilities

Functions:
    running_locally() -> bool:
        True if APP_ENV is explicitly set to 'local', False otherwise.

Local runs re-raise unexpected view errors for the debugger. Any other
environment, including an unset APP_ENV, gets plain-text 500 responses.

Example:
    >>> from urlshortener.utils.runtime import running_locally
    >>> os.environ['APP_ENV'] = 'local'
    >>> running_locally()
    True
    >>> del os.environ['APP_ENV']
    >>> running_locally()
    False
"""

import os

from urlshortener.constants import ENV


def running_locally() -> bool:
    """Check if the application is running locally (APP_ENV set to 'local')"""
    return os.getenv(ENV.App.APP_ENV, '').lower() == 'local'
