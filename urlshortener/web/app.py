"""Flask application factory for the URL shortener

Routes:
    GET  /              Serve the HTML form
    POST /              Redirect (303) to /shorten
    POST /shorten       Shorten the `url` form field (or query parameter)
    GET  /short/<key>   Redirect (301) to the original URL

HTTP responses:
    200: Form served or URL shortened (HTML snippet with the short link)
    301: Redirect to the original URL
    303: Form posted to / instead of /shorten
    400: Missing `url` form field
    404: Unknown short key
    405: Wrong method on /shorten
    500: Data store failure or unexpected error

The services are passed in explicitly; the app itself holds no data store
handle.

Example:
    >>> app = create_app(ShortenService(dao), RedirectResolver(dao))
    >>> app.run(port=3030, threaded=True)
"""

import logging

from flask import Flask, Response, request

from urlshortener.dao.exceptions import DataStoreError, LinkNotFoundError
from urlshortener.exceptions import ValidationError
from urlshortener.services import ShortenService, RedirectResolver
from urlshortener.web.responses import (
    guarantee_500_response,
    response_200_html,
    response_301,
    response_303,
    response_400,
    response_404,
    response_405,
    response_500,
)
from urlshortener.web.constants import (
    FORM_HTML,
    SHORTENED_HTML,
    FORM_SERVED,
    MISSING_URL,
    LINK_CREATED,
    SHORT_URL_NOT_FOUND,
    REDIRECT_SUCCESS,
    DATASTORE_ERROR,
)


logger = logging.getLogger(__name__)


def create_app(shortener: ShortenService, resolver: RedirectResolver) -> Flask:
    app = Flask(__name__)

    @app.route('/', methods=['GET', 'POST'])
    @guarantee_500_response
    def form() -> Response:
        if request.method == 'POST':
            return response_303(location='/shorten')

        logger.info('Serving the form.', extra={'event': FORM_SERVED})
        return response_200_html(FORM_HTML)

    @app.route('/shorten', methods=['POST'])
    @guarantee_500_response
    def shorten() -> Response:
        original_url = request.values.get('url', '')

        try:
            short_url = shortener.shorten(original_url)
        except ValidationError as e:
            logger.info('Missing "url" in form. Responding with 400.', extra={'event': MISSING_URL})
            return response_400(str(e))
        except DataStoreError:
            logger.exception('Failed to store link record. Responding with 500.', extra={'event': DATASTORE_ERROR})
            return response_500('Failed to insert URL into DB')

        logger.info('Link created.', extra={'event': LINK_CREATED, 'shortUrl': short_url})
        return response_200_html(SHORTENED_HTML.format(short_url=short_url))

    @app.route('/short/', defaults={'short_key': ''})
    @app.route('/short/<path:short_key>')
    @guarantee_500_response
    def follow(short_key: str) -> Response:
        try:
            original_url = resolver.resolve(short_key)
        except LinkNotFoundError:
            logger.info(
                'Short key not found in database. Responding with 404.',
                extra={'shortKey': short_key, 'event': SHORT_URL_NOT_FOUND},
            )
            return response_404('Shortened key not found')
        except DataStoreError:
            logger.exception('Failed to look up short key. Responding with 500.', extra={'shortKey': short_key, 'event': DATASTORE_ERROR})
            return response_500()

        logger.info('Redirecting client to original URL. Responding with 301.', extra={'shortKey': short_key, 'event': REDIRECT_SUCCESS})
        return response_301(location=original_url)

    @app.errorhandler(405)
    def method_not_allowed(error) -> Response:
        return response_405('Invalid request method')

    return app
