"""Request and response tests."""

import json

import pytest
from roadrouter_core.http.request import Request
from roadrouter_core.http.response import Response


class TestRequest:
    """Test Request class."""

    def test_create_request(self):
        """Test request creation."""
        request = Request(method="GET", uri="/api/users")
        assert request.method == "GET"
        assert request.path == "/api/users"

    def test_path_normalized(self):
        """Test query, trailing slash and encoding are handled."""
        request = Request(method="GET", uri="/api/users/john%20doe/?page=2")
        assert request.path == "/api/users/john doe"

    def test_root_path(self):
        """Test the root path."""
        assert Request(method="GET", uri="/").path == "/"
        assert Request(method="GET", uri="").path == "/"

    def test_base_path_stripped(self):
        """Test the mount point is removed."""
        request = Request(method="GET", uri="/blog/posts/1", base_path="/blog/")
        assert request.path == "/posts/1"

    def test_base_path_without_trailing_slash(self):
        """Test requests for the mount point itself."""
        request = Request(method="GET", uri="/blog", base_path="/blog/")
        assert request.path == "/"

    def test_host(self):
        """Test host lookup."""
        assert Request(method="GET", headers={"host": "example.com"}).host == "example.com"
        assert Request(method="GET").host is None
        assert Request(method="GET", headers={"Host": ""}).host is None

    def test_header_case_insensitive(self):
        """Test header lookup ignores case."""
        request = Request(method="POST", headers={"x-http-method-override": "PUT"})
        assert request.header("X-HTTP-Method-Override") == "PUT"
        assert request.header("Missing") is None

    def test_from_raw(self):
        """Test parsing a raw request head."""
        raw = (
            b"POST /users/1?x=1 HTTP/1.1\r\n"
            b"Host: api.example.com\r\n"
            b"X-HTTP-Method-Override: DELETE\r\n"
            b"\r\n"
            b"body"
        )
        request = Request.from_raw(raw)

        assert request.method == "POST"
        assert request.path == "/users/1"
        assert request.host == "api.example.com"
        assert request.header("x-http-method-override") == "DELETE"

    def test_from_environ(self):
        """Test building a request from a WSGI environ."""
        environ = {
            "REQUEST_METHOD": "GET",
            "SCRIPT_NAME": "/app",
            "PATH_INFO": "/users/7",
            "QUERY_STRING": "tab=1",
            "HTTP_HOST": "example.com",
            "HTTP_X_HTTP_METHOD_OVERRIDE": "PUT",
            "CONTENT_TYPE": "text/plain",
        }
        request = Request.from_environ(environ)

        assert request.base_path == "/app/"
        assert request.path == "/users/7"
        assert request.host == "example.com"
        assert request.header("X-HTTP-Method-Override") == "PUT"
        assert request.header("Content-Type") == "text/plain"

    def test_from_environ_non_ascii_path(self):
        """Test PATH_INFO bytes carried as latin-1 decode to the UTF-8 path."""
        environ = {
            "REQUEST_METHOD": "GET",
            "PATH_INFO": "/café/naïve".encode("utf-8").decode("latin-1"),
        }
        request = Request.from_environ(environ)

        assert request.path == "/café/naïve"


class TestResponse:
    """Test Response class."""

    def test_send_text(self):
        """Test string results."""
        response = Response()
        response.send("hello")
        assert response.body == b"hello"
        assert response.headers["Content-Type"].startswith("text/plain")

    def test_send_json(self):
        """Test dict results become JSON."""
        response = Response()
        response.send({"message": "success"})
        assert json.loads(response.body) == {"message": "success"}
        assert response.headers["Content-Type"] == "application/json"

    def test_send_none(self):
        """Test None results emit nothing."""
        response = Response()
        response.send(None)
        assert response.body == b""
        assert response.status == 200

    def test_send_tuple(self):
        """Test status tuples."""
        response = Response()
        response.send((201, "created", {"Location": "/users/1"}))
        assert response.status == 201
        assert response.body == b"created"
        assert response.headers["Location"] == "/users/1"

    def test_send_invalid_tuple(self):
        """Test malformed status tuples."""
        with pytest.raises(ValueError):
            Response().send(("oops", "body"))

    def test_send_response(self):
        """Test Response results are copied."""
        response = Response()
        response.send(Response(status=302, headers={"Location": "/"}))
        assert response.status == 302
        assert response.headers["Location"] == "/"

    def test_not_found(self):
        """Test the generic not-found response."""
        response = Response()
        response.not_found()
        assert response.status == 404
        assert response.status_line == "HTTP/1.1 404 Not Found"

    def test_suppressed_body(self):
        """Test HEAD responses keep headers but drop the body."""
        response = Response()
        response.begin(suppress_body=True)
        response.send("hello")
        response.finish()

        assert response.body == b""
        assert response.headers["Content-Length"] == "5"

    def test_to_bytes(self):
        """Test rendering a raw response."""
        response = Response()
        response.send("ok")
        response.finish()

        raw = response.to_bytes()
        assert raw.startswith(b"HTTP/1.1 200 OK\r\n")
        assert raw.endswith(b"\r\n\r\nok")
