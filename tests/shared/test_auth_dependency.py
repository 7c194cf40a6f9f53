"""Tests for the shared authentication dependency and error rendering."""

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel
from shared.api import register_error_handlers
from shared.auth import CurrentUser, authenticate
from shared.security import create_access_token
from shared.tokens import get_blacklist


class Payload(BaseModel):
    name: str


@pytest.fixture()
def client():
    app = FastAPI()
    sellers = authenticate(roles=("seller",))

    @app.get("/whoami")
    async def whoami(current_user: CurrentUser = Depends(sellers)):
        return {"id": current_user.id, "role": current_user.role, "token": current_user.token}

    @app.post("/echo")
    async def echo(body: Payload):
        return body.model_dump()

    register_error_handlers(app)
    return TestClient(app)


def _token(role="seller"):
    return create_access_token({"id": "s-1", "username": "sam", "email": "sam@x.io", "role": role})


class TestAuthenticate:
    def test_missing_token_is_401(self, client):
        response = client.get("/whoami")
        assert response.status_code == 401
        assert response.json()["message"] == "Unauthorized, No token provided"

    def test_bearer_header_is_accepted(self, client):
        token = _token()
        response = client.get("/whoami", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 200
        assert response.json() == {"id": "s-1", "role": "seller", "token": token}

    def test_cookie_is_accepted(self, client):
        client.cookies.set("token", _token())
        response = client.get("/whoami")
        assert response.status_code == 200

    def test_garbage_token_is_401(self, client):
        response = client.get("/whoami", headers={"Authorization": "Bearer not-a-jwt"})
        assert response.status_code == 401
        assert response.json()["message"] == "Unauthorized: Invalid token"

    def test_revoked_token_is_401(self, client):
        token = _token()
        get_blacklist().revoke(token, 60)
        response = client.get("/whoami", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_wrong_role_is_403(self, client):
        response = client.get("/whoami", headers={"Authorization": f"Bearer {_token(role='user')}"})
        assert response.status_code == 403
        assert response.json()["message"] == "Forbidden: Insufficient permission"


class TestRequestValidation:
    def test_schema_errors_are_400_with_a_message(self, client):
        response = client.post("/echo", json={})
        assert response.status_code == 400
        body = response.json()
        assert body["message"]
        assert body["errors"][0]["field"] == "name"
