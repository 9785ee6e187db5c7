"""Auth Routes & Verification — register, login and the bearer-token gate.

Invariants:
    - register/login answer {user, tokens.access.{token, expires}}
    - Any authentication failure on a protected route is 401 "Please authenticate"
    - The password hash never appears in responses
"""

import time
from uuid import uuid4

from app.core.domain_types import TokenType
from app.services.token_service import generate_token
from tests.services.factories import USER_PASSWORD


async def test_register_returns_user_and_tokens(client):
    res = await client.post("/api/v1/auth/register", json={
        "name": "new-user", "email": "New.User@Example.com", "password": "secret123",
    })
    assert res.status_code == 201
    body = res.json()
    assert body["user"]["email"] == "new.user@example.com"
    assert body["user"]["wallet_money"] == 500
    assert body["user"]["address"] == "ADDRESS_NOT_SET"
    assert "password" not in body["user"]
    assert body["tokens"]["access"]["token"]
    assert body["tokens"]["access"]["expires"]


async def test_register_duplicate_email_is_bad_request(client, seed_user):
    res = await client.post("/api/v1/auth/register", json={
        "name": "dup", "email": seed_user.email, "password": "secret123",
    })
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "Email already taken"


async def test_register_weak_password_is_validation_error(client):
    res = await client.post("/api/v1/auth/register", json={
        "name": "weak", "email": "weak@example.com", "password": "onlyletters",
    })
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_login_with_correct_password(client, seed_user):
    res = await client.post("/api/v1/auth/login", json={
        "email": seed_user.email, "password": USER_PASSWORD,
    })
    assert res.status_code == 200
    assert res.json()["user"]["id"] == str(seed_user.id)


async def test_login_with_wrong_password_is_unauthorized(client, seed_user):
    res = await client.post("/api/v1/auth/login", json={
        "email": seed_user.email, "password": "wrongpass1",
    })
    assert res.status_code == 401
    assert res.json()["error"]["message"] == "Incorrect email or password"


async def test_login_unknown_email_is_unauthorized(client):
    res = await client.post("/api/v1/auth/login", json={
        "email": "nobody@example.com", "password": USER_PASSWORD,
    })
    assert res.status_code == 401
    assert res.json()["error"]["message"] == "Incorrect email or password"


async def test_issued_token_authenticates_protected_route(client):
    reg = await client.post("/api/v1/auth/register", json={
        "name": "round-trip", "email": "rt@example.com", "password": "secret123",
    })
    token = reg.json()["tokens"]["access"]["token"]
    user_id = reg.json()["user"]["id"]

    res = await client.get(
        f"/api/v1/users/{user_id}", headers={"Authorization": f"Bearer {token}"},
    )
    assert res.status_code == 200
    assert res.json()["email"] == "rt@example.com"


async def test_missing_token_is_unauthorized(client):
    res = await client.get("/api/v1/cart")
    assert res.status_code == 401
    assert res.json()["error"]["message"] == "Please authenticate"
    assert res.headers["www-authenticate"] == "Bearer"


async def test_expired_token_is_unauthorized(client, seed_user):
    token = generate_token(seed_user.id, int(time.time()) - 10, TokenType.ACCESS)
    res = await client.get("/api/v1/cart", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 401
    assert res.json()["error"]["message"] == "Please authenticate"


async def test_token_for_deleted_user_is_unauthorized(client):
    token = generate_token(uuid4(), int(time.time()) + 60, TokenType.ACCESS)
    res = await client.get("/api/v1/cart", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 401


async def test_non_bearer_scheme_is_unauthorized(client, seed_user):
    res = await client.get("/api/v1/cart", headers={"Authorization": "Basic abc"})
    assert res.status_code == 401


async def test_login_with_overlong_password_is_unauthorized(client, seed_user):
    res = await client.post("/api/v1/auth/login", json={
        "email": seed_user.email, "password": "a1" * 50,
    })
    assert res.status_code == 401
    assert res.json()["error"]["message"] == "Incorrect email or password"


async def test_register_with_multibyte_overlong_password_is_validation_error(client):
    res = await client.post("/api/v1/auth/register", json={
        "name": "accents", "email": "accents@example.com", "password": "é" * 60 + "a1",
    })
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"
