"""
Integration Tests for API Endpoints
Tests the complete flow from HTTP down to the item store
"""
import pytest
from httpx import AsyncClient

CLIENT_URL = "/api/v1/client"


async def create_client(client: AsyncClient, login="jdoe", password="pw"):
    response = await client.post(CLIENT_URL, json={"login": login, "password": password})
    assert response.status_code == 201
    return response.json()["client"]


async def create_password(client: AsyncClient, client_id, name="mail", value="s3cret"):
    response = await client.post(f"{CLIENT_URL}/{client_id}/passwords", json={
        "name": name,
        "website": "https://mail.example.com",
        "login": "jdoe@example.com",
        "value": value,
    })
    assert response.status_code == 201
    return response.json()["password"]


class TestClientEndpoints:
    """Integration tests for client endpoints"""

    @pytest.mark.asyncio
    async def test_create_client(self, client: AsyncClient):
        """Test creating a client returns it without password"""
        response = await client.post(CLIENT_URL, json={"login": "jdoe", "password": "pw"})

        assert response.status_code == 201
        data = response.json()
        assert data["statusCode"] == 201
        assert data["message"] == "Created"
        assert data["client"]["login"] == "jdoe"
        assert data["client"]["clientId"]
        assert data["client"]["metadata"]["createdDate"] == data["client"]["metadata"]["updatedDate"]
        assert "password" not in data["client"]

    @pytest.mark.asyncio
    async def test_create_duplicate_login(self, client: AsyncClient):
        """Test a login can only be used once"""
        await create_client(client)

        response = await client.post(CLIENT_URL, json={"login": "jdoe", "password": "other"})

        assert response.status_code == 400
        assert response.json() == {
            "statusCode": 400,
            "message": "Login is already in use",
            "errorCode": "LoginAlreadyExists",
        }

    @pytest.mark.asyncio
    async def test_create_invalid_body(self, client: AsyncClient):
        """Test a body without password is a bad request"""
        response = await client.post(CLIENT_URL, json={"login": "jdoe"})

        assert response.status_code == 400
        assert response.json()["errorCode"] == "BadRequest"

    @pytest.mark.asyncio
    async def test_update_client(self, client: AsyncClient):
        """Test updating login and password"""
        created = await create_client(client)

        response = await client.put(
            f"{CLIENT_URL}/{created['clientId']}", json={"login": "jdoe2", "password": "pw2"}
        )

        assert response.status_code == 200
        data = response.json()["client"]
        assert data["login"] == "jdoe2"
        assert data["metadata"]["createdDate"] == created["metadata"]["createdDate"]

    @pytest.mark.asyncio
    async def test_update_missing_client(self, client: AsyncClient):
        """Test updating a client that doesn't exist"""
        response = await client.put(f"{CLIENT_URL}/missing", json={"login": "jdoe", "password": "pw"})

        assert response.status_code == 404
        assert response.json() == {
            "statusCode": 404,
            "message": "Login not found",
            "errorCode": "ClientNotFound",
        }

    @pytest.mark.asyncio
    async def test_delete_client_cascades(self, client: AsyncClient):
        """Test deleting a client deletes its passwords"""
        created = await create_client(client)
        await create_password(client, created["clientId"], name="one")
        await create_password(client, created["clientId"], name="two")

        response = await client.delete(f"{CLIENT_URL}/{created['clientId']}")

        assert response.status_code == 204
        listing = await client.get(f"{CLIENT_URL}/{created['clientId']}/passwords")
        assert listing.status_code == 404
        assert listing.json()["errorCode"] == "PasswordNotFound"

        # The login is free again
        await create_client(client)

    @pytest.mark.asyncio
    async def test_delete_client_without_passwords(self, client: AsyncClient):
        """Test deleting a client that owns nothing"""
        created = await create_client(client)

        response = await client.delete(f"{CLIENT_URL}/{created['clientId']}")

        assert response.status_code == 204


class TestPasswordEndpoints:
    """Integration tests for password endpoints"""

    @pytest.mark.asyncio
    async def test_create_echoes_ciphertext(self, client: AsyncClient):
        """Test the created password carries the stored, encrypted value"""
        owner = await create_client(client)

        password = await create_password(client, owner["clientId"])

        assert password["value"] != "s3cret"
        assert password["clientId"] == owner["clientId"]
        assert password["passwordId"]

    @pytest.mark.asyncio
    async def test_list_decrypts(self, client: AsyncClient):
        """Test listing returns plaintext values"""
        owner = await create_client(client)
        await create_password(client, owner["clientId"], name="one", value="first")
        await create_password(client, owner["clientId"], name="two", value="second")

        response = await client.get(f"{CLIENT_URL}/{owner['clientId']}/passwords")

        assert response.status_code == 200
        values = {item["name"]: item["value"] for item in response.json()["passwords"]}
        assert values == {"one": "first", "two": "second"}

    @pytest.mark.asyncio
    async def test_list_empty(self, client: AsyncClient):
        """Test listing for a client without passwords"""
        response = await client.get(f"{CLIENT_URL}/nobody/passwords")

        assert response.status_code == 404
        assert response.json() == {
            "statusCode": 404,
            "message": "No passwords exist for the client ID 'nobody'",
            "errorCode": "PasswordNotFound",
        }

    @pytest.mark.asyncio
    async def test_update_password(self, client: AsyncClient):
        """Test replacing every field of a password"""
        owner = await create_client(client)
        password = await create_password(client, owner["clientId"])

        response = await client.put(
            f"{CLIENT_URL}/{owner['clientId']}/passwords/{password['passwordId']}",
            json={"name": "mail (work)", "login": "jdoe@work.example.com", "value": "n3w"},
        )

        assert response.status_code == 200
        updated = response.json()["password"]
        assert updated["name"] == "mail (work)"
        assert updated["website"] is None

        listing = await client.get(f"{CLIENT_URL}/{owner['clientId']}/passwords")
        assert listing.json()["passwords"][0]["value"] == "n3w"

    @pytest.mark.asyncio
    async def test_update_missing_password(self, client: AsyncClient):
        """Test updating a password that doesn't exist"""
        owner = await create_client(client)

        response = await client.put(
            f"{CLIENT_URL}/{owner['clientId']}/passwords/missing",
            json={"name": "mail", "login": "jdoe", "value": "x"},
        )

        assert response.status_code == 404
        assert response.json() == {
            "statusCode": 404,
            "message": "No password exists with ID 'missing'",
            "errorCode": "PasswordNotFound",
        }

    @pytest.mark.asyncio
    async def test_delete_password(self, client: AsyncClient):
        """Test deleting one password keeps the others"""
        owner = await create_client(client)
        first = await create_password(client, owner["clientId"], name="one")
        await create_password(client, owner["clientId"], name="two")

        response = await client.delete(f"{CLIENT_URL}/{owner['clientId']}/passwords/{first['passwordId']}")

        assert response.status_code == 204
        listing = await client.get(f"{CLIENT_URL}/{owner['clientId']}/passwords")
        assert [item["name"] for item in listing.json()["passwords"]] == ["two"]


class TestSecurityQuestionEndpoint:
    """Integration tests for the security question challenge"""

    @pytest.mark.asyncio
    async def test_not_implemented(self, client: AsyncClient):
        """Test the challenge always answers 501"""
        response = await client.get("/api/v1/security-question-challenge/jdoe")

        assert response.status_code == 501
        assert response.json() == {
            "statusCode": 501,
            "message": "Not Implemented",
            "errorCode": "NotImplemented",
        }
