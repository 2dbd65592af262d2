"""Plain-text and HTML response helpers for the HTTP views.

Error bodies are short plain-text messages without any structured payload.
"""

import logging
import functools
from collections.abc import Callable

from flask import Response, redirect

from urlshortener.utils.runtime import running_locally
from urlshortener.web.constants import UNKNOWN_INTERNAL_SERVER_ERROR


logger = logging.getLogger(__name__)


def _plain(message: str, status: int) -> Response:
    return Response(message, status=status, mimetype='text/plain')


def response_200_html(body: str) -> Response:
    return Response(body, status=200, mimetype='text/html')


def response_301(*, location: str) -> Response:
    return redirect(location, code=301)


def response_303(*, location: str) -> Response:
    return redirect(location, code=303)


def response_400(message: str | None = None) -> Response:
    return _plain(message or 'Bad Request', 400)


def response_404(message: str | None = None) -> Response:
    return _plain(message or 'Not Found', 404)


def response_405(message: str | None = None) -> Response:
    return _plain(message or 'Method Not Allowed', 405)


def response_500(message: str | None = None) -> Response:
    return _plain(message or 'Internal Server Error', 500)


def guarantee_500_response(view: Callable[..., Response]) -> Callable[..., Response]:
    """Decorator: turn any unexpected view exception into a 500 response

    When running locally the original exception is re-raised so it shows up
    in the development server's traceback.
    """

    @functools.wraps(view)
    def wrapper(*args, **kwargs) -> Response:
        try:
            return view(*args, **kwargs)
        except Exception:
            if running_locally():
                raise
            logger.exception('Unhandled exception in view. Responding with 500.', extra={'event': UNKNOWN_INTERNAL_SERVER_ERROR})
            return response_500()

    return wrapper
