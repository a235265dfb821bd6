# Copyright 2025 DataStax Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except
# in compliance with the License. You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express
# or implied. See the License for the specific language governing permissions and limitations under
# the License.

"""Tests for response classification and status handling."""

import httpx
import pytest

from transactions_sdk.errors import APIError, AuthenticationError, InternalError
from transactions_sdk.observability import RecordingRequestLogger
from transactions_sdk.response import Bare, Enveloped, ResponseInterpreter, classify_body


class TestClassifyBody:
    def test_envelope(self):
        assert classify_body({"success": True, "data": {"id": "1"}}) == Enveloped({"id": "1"})

    def test_envelope_with_null_data(self):
        assert classify_body({"success": True, "data": None}) == Enveloped(None)

    @pytest.mark.parametrize(
        "body",
        [
            {"id": "1"},
            {"success": False, "data": {"id": "1"}},
            {"success": "true", "data": {"id": "1"}},
            {"success": 1, "data": {"id": "1"}},
            {"success": True},
            [1, 2],
            "text",
            None,
        ],
    )
    def test_everything_else_is_bare(self, body):
        assert classify_body(body) == Bare(body)


class TestResponseInterpreter:
    def setup_method(self):
        self.logger = RecordingRequestLogger()
        self.interpreter = ResponseInterpreter(self.logger)

    def test_envelope_and_bare_bodies_are_equivalent(self):
        wrapped = httpx.Response(200, json={"success": True, "data": {"id": "1"}})
        bare = httpx.Response(200, json={"id": "1"})
        assert self.interpreter.interpret(wrapped) == {"id": "1"}
        assert self.interpreter.interpret(bare) == {"id": "1"}

    def test_expected_status_is_success(self):
        response = httpx.Response(202, json={"requestId": "r-1"})
        assert self.interpreter.interpret(response, expected_status=202) == {"requestId": "r-1"}

    def test_expected_status_with_envelope(self):
        response = httpx.Response(201, json={"success": True, "data": {"message": "ok"}})
        assert self.interpreter.interpret(response, expected_status=201) == {"message": "ok"}

    def test_non_2xx_without_expected_status_fails(self):
        response = httpx.Response(302, json={"id": "1"})
        with pytest.raises(APIError) as exc_info:
            self.interpreter.interpret(response)
        assert exc_info.value.status_code == 302

    def test_not_found(self):
        response = httpx.Response(404, json={"error": "not found"}, headers={"X-Request-ID": "r"})
        with pytest.raises(APIError) as exc_info:
            self.interpreter.interpret(response)
        error = exc_info.value
        assert error.status_code == 404
        assert error.body == {"error": "not found"}
        assert error.headers["x-request-id"] == "r"
        assert "not found" in str(error)

    def test_message_field_is_preferred(self):
        response = httpx.Response(400, json={"message": "bad name", "error": "Bad Request"})
        with pytest.raises(APIError, match="bad name"):
            self.interpreter.interpret(response)

    def test_raw_text_body(self):
        response = httpx.Response(500, text="upstream exploded")
        with pytest.raises(APIError) as exc_info:
            self.interpreter.interpret(response)
        assert exc_info.value.body == "upstream exploded"

    def test_reason_phrase_when_body_is_empty(self):
        with pytest.raises(APIError, match="Service Unavailable"):
            self.interpreter.interpret(httpx.Response(503))

    @pytest.mark.parametrize("status", [401, 403])
    @pytest.mark.parametrize(
        "kwargs", [{"json": {"error": "nope"}}, {"text": "<html>denied</html>"}, {}]
    )
    def test_auth_failures(self, status, kwargs):
        with pytest.raises(AuthenticationError) as exc_info:
            self.interpreter.interpret(httpx.Response(status, **kwargs))
        assert exc_info.value.status_code == status

    def test_401_is_not_expected_status_bypass(self):
        with pytest.raises(AuthenticationError):
            self.interpreter.interpret(httpx.Response(401, json={}), expected_status=202)

    def test_no_content_skips_parsing(self):
        response = httpx.Response(204, content=b"{not json")
        assert self.interpreter.interpret(response) is None

    def test_zero_content_length_skips_parsing(self):
        response = httpx.Response(200, headers={"Content-Length": "0"})
        assert self.interpreter.interpret(response) is None

    def test_invalid_json_is_internal_error(self):
        with pytest.raises(InternalError, match="not valid JSON"):
            self.interpreter.interpret(httpx.Response(200, text="<html>"))

    def test_classification_is_logged(self):
        self.interpreter.interpret(httpx.Response(200, json={"success": True, "data": 1}))
        assert "response.classified" in self.logger.names()
        _, _, fields = self.logger.events[-1]
        assert fields["shape"] == "Enveloped"
