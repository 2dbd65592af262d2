"""Unit tests for response helpers in web/responses.py."""

import pytest
from flask import Flask

from urlshortener.web import responses


@pytest.fixture(autouse=True)
def app_context():
    with Flask(__name__).app_context():
        yield


@pytest.mark.parametrize(
    'helper, status, default_message',
    [
        (responses.response_400, 400, 'Bad Request'),
        (responses.response_404, 404, 'Not Found'),
        (responses.response_405, 405, 'Method Not Allowed'),
        (responses.response_500, 500, 'Internal Server Error'),
    ],
)
def test_plain_text_responses(helper, status, default_message):
    default = helper()
    custom = helper('custom message')

    assert default.status_code == status
    assert default.mimetype == 'text/plain'
    assert default.get_data(as_text=True) == default_message
    assert custom.get_data(as_text=True) == 'custom message'


def test_response_200_html():
    response = responses.response_200_html('<p>hi</p>')
    assert response.status_code == 200
    assert response.mimetype == 'text/html'


@pytest.mark.parametrize('helper, status', [(responses.response_301, 301), (responses.response_303, 303)])
def test_redirect_responses(helper, status):
    response = helper(location='https://example.com')
    assert response.status_code == status
    assert response.headers['Location'] == 'https://example.com'


def test_guarantee_500_response(monkeypatch):
    monkeypatch.setattr(responses, 'running_locally', lambda: False)

    @responses.guarantee_500_response
    def faulty_view():
        raise RuntimeError('boom')

    response = faulty_view()

    assert response.status_code == 500
    assert response.get_data(as_text=True) == 'Internal Server Error'


def test_guarantee_500_response_reraises_when_running_locally(monkeypatch):
    monkeypatch.setattr(responses, 'running_locally', lambda: True)

    @responses.guarantee_500_response
    def faulty_view():
        raise RuntimeError('boom')

    with pytest.raises(RuntimeError, match='boom'):
        faulty_view()


def test_guarantee_500_response_passes_through_results():
    @responses.guarantee_500_response
    def view():
        return responses.response_404('nope')

    assert view().status_code == 404
