"""Auth Routes — POST /auth with real bcrypt verification and JWT issuance."""

from user_service.api.dependencies import get_token_issuer


async def _register(client, payload) -> str:
    res = await client.post("/users", json=payload)
    assert res.status_code == 201, res.text
    return res.json()["data"]["id"]


async def test_correct_credentials_return_token(client, ana_payload):
    user_id = await _register(client, ana_payload)

    res = await client.post(
        "/auth", json={"email": "ana@x.com", "password": "Secret123"},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["data"]["token"]
    assert body["data"]["token_type"] == "bearer"
    assert body["data"]["role"] == "Customer"

    claims = get_token_issuer().read_claims(body["data"]["token"])
    assert claims["sub"] == user_id
    assert claims["email"] == "ana@x.com"


async def test_wrong_password_and_unknown_email_get_same_401(client, ana_payload):
    await _register(client, ana_payload)

    wrong = await client.post(
        "/auth", json={"email": "ana@x.com", "password": "Wrong1234"},
    )
    unknown = await client.post(
        "/auth", json={"email": "zoe@x.com", "password": "Wrong1234"},
    )

    assert wrong.status_code == unknown.status_code == 401
    assert wrong.json() == unknown.json()
    assert wrong.json() == {
        "success": False,
        "message": "Unauthorized",
        "data": None,
        "errors": ["Invalid email or password"],
    }


async def test_inactive_user_cannot_authenticate(client, ana_payload):
    await _register(client, {**ana_payload, "status": "Inactive"})
    res = await client.post(
        "/auth", json={"email": "ana@x.com", "password": "Secret123"},
    )
    assert res.status_code == 401


async def test_malformed_credentials_are_400(client):
    res = await client.post("/auth", json={"email": "ana"})
    assert res.status_code == 400
    assert res.json()["errors"] == [
        "email: Email must be a valid email address",
        "password: Password is required",
    ]


async def test_garbage_token_is_rejected(client):
    res = await client.get(
        "/users/me", headers={"Authorization": "Bearer not.a.jwt"},
    )
    assert res.status_code == 401
    assert res.json()["errors"] == ["Authentication required"]
