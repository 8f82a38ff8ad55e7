"""
Tests for the central error responder.

Covers the envelope for raised ApiErrors, unmatched routes, wrong
verbs, body validation and unexpected exceptions.
"""

from fastapi import FastAPI
from fastapi.testclient import TestClient

from biztime.core.errors import ApiError, register_error_handlers


def _app_with_failing_routes() -> FastAPI:
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/teapot")
    def teapot():
        raise ApiError("I'm a teapot", 418)

    @app.get("/no-status")
    def no_status():
        raise ApiError("Something broke", None)

    @app.get("/boom")
    def boom():
        raise RuntimeError("kaboom")

    return app


class TestApiError:
    """Tests for the ApiError signal itself."""

    def test_to_dict(self) -> None:
        assert ApiError("Gone", 404).to_dict() == {"message": "Gone", "status": 404}

    def test_status_defaults_to_500(self) -> None:
        assert ApiError("Broken").status == 500


class TestResponder:
    """Tests for the registered exception handlers."""

    def test_raised_api_error_uses_its_status(self) -> None:
        client = TestClient(_app_with_failing_routes())
        response = client.get("/teapot")
        assert response.status_code == 418
        assert response.json() == {
            "error": {"message": "I'm a teapot", "status": 418},
            "message": "I'm a teapot",
        }

    def test_api_error_without_status_keeps_message(self) -> None:
        client = TestClient(_app_with_failing_routes())
        response = client.get("/no-status")
        assert response.status_code == 500
        assert response.json() == {
            "error": {"message": "Something broke", "status": 500},
            "message": "Something broke",
        }

    def test_unexpected_exception_is_500(self) -> None:
        client = TestClient(_app_with_failing_routes(), raise_server_exceptions=False)
        response = client.get("/boom")
        assert response.status_code == 500
        assert response.json() == {
            "error": {"message": "Internal Server Error", "status": 500},
            "message": "Internal Server Error",
        }


class TestAppEnvelope:
    """Envelope behaviour on the real application."""

    def test_unmatched_route_is_404(self, client) -> None:
        response = client.get("/no-such-thing")
        assert response.status_code == 404
        assert response.json() == {
            "error": {"message": "Not Found", "status": 404},
            "message": "Not Found",
        }

    def test_wrong_method_uses_envelope(self, client) -> None:
        response = client.put("/companies", json={})
        assert response.status_code == 405
        assert response.json()["error"] == {"message": "Method Not Allowed", "status": 405}

    def test_validation_error_uses_envelope(self, client) -> None:
        response = client.patch("/invoices/1", json={"amt": "lots"})
        body = response.json()
        assert response.status_code == 500
        assert body["message"] == "Invalid request"
        assert body["error"]["status"] == 500
        assert body["error"]["details"]

    def test_non_numeric_invoice_id_is_500(self, client) -> None:
        response = client.get("/invoices/abc")
        assert response.status_code == 500
        assert response.json()["error"]["status"] == 500

    def test_missing_body_field_is_500(self, client) -> None:
        response = client.patch("/invoices/1", json={"paid": True})
        assert response.status_code == 500
        assert response.json()["message"] == "Invalid request"
