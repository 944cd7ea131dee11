"""Unit tests for the error envelope."""

import json

import pytest
from fastapi import HTTPException
from fastapi.exceptions import RequestValidationError
from starlette.requests import Request

from murmur.interface.api.errors import (
    http_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)


def _request(path: str = "/api/comments/") -> Request:
    return Request({"type": "http", "method": "POST", "path": path, "headers": []})


class TestErrorEnvelope:
    @pytest.mark.asyncio
    async def test_http_errors_render_msg(self):
        response = await http_exception_handler(
            _request(), HTTPException(status_code=404, detail="Comment not found")
        )

        assert response.status_code == 404
        assert json.loads(response.body) == {"msg": "Comment not found"}

    @pytest.mark.asyncio
    async def test_validation_errors_render_errors_array(self):
        exc = RequestValidationError(
            [
                {
                    "type": "string_too_short",
                    "loc": ("body", "text"),
                    "msg": "String should have at least 1 character",
                    "input": "",
                }
            ]
        )

        response = await validation_exception_handler(_request(), exc)

        assert response.status_code == 400
        assert json.loads(response.body) == {
            "errors": [
                {
                    "msg": "String should have at least 1 character",
                    "param": "text",
                    "location": "body",
                }
            ]
        }

    @pytest.mark.asyncio
    async def test_unexpected_errors_hide_detail(self):
        response = await unhandled_exception_handler(
            _request(), RuntimeError("connection refused")
        )

        assert response.status_code == 500
        assert json.loads(response.body) == {"msg": "Server error"}
