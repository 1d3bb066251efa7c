"""Unit tests for the error responder."""

from __future__ import annotations

import pytest

from rest_framework import exceptions
from rest_framework.test import APIRequestFactory

from modules.core.exception_handler import api_exception_handler, not_found
from modules.core.exceptions import ApiError, ConflictError, NotFoundError, ValidationError

pytestmark = pytest.mark.unit


@pytest.fixture()
def context():
    return {"request": APIRequestFactory().patch("/dishes/1")}


class TestApiExceptionHandler:
    @pytest.mark.parametrize(
        ("exc", "status_code"),
        [
            (ValidationError("bad field"), 400),
            (NotFoundError("missing"), 404),
            (ConflictError("frozen"), 400),
        ],
    )
    def test_api_errors_keep_status_and_message(self, exc, status_code, context):
        response = api_exception_handler(exc, context)
        assert response.status_code == status_code
        assert response.data == {"error": exc.message}

    def test_explicit_status_overrides_class_default(self, context):
        response = api_exception_handler(ApiError("teapot", status_code=418), context)
        assert response.status_code == 418
        assert response.data == {"error": "teapot"}

    def test_unexpected_exception_is_500(self, context):
        response = api_exception_handler(RuntimeError("boom"), context)
        assert response.status_code == 500
        assert response.data == {"error": "Something went wrong!"}

    def test_bare_api_error_uses_default_message(self, context):
        response = api_exception_handler(ApiError(), context)
        assert response.status_code == 500
        assert response.data == {"error": "Something went wrong!"}

    def test_method_not_allowed(self, context):
        response = api_exception_handler(exceptions.MethodNotAllowed("PATCH"), context)
        assert response.status_code == 405
        assert response.data == {"error": "PATCH not allowed for /dishes/1"}

    def test_parse_error(self, context):
        response = api_exception_handler(exceptions.ParseError("bad json"), context)
        assert response.status_code == 400
        assert response.data == {"error": "bad json"}


class TestNotFoundHandler:
    def test_renders_json(self):
        request = APIRequestFactory().get("/nowhere")
        response = not_found(request)
        assert response.status_code == 404
        assert response.content == b'{"error": "Path not found: /nowhere"}'
