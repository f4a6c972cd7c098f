"""End-to-end tests for product endpoints."""

import pytest

from tests.harness import create_api_fixture

api_env = create_api_fixture()

PRODUCT = {
    "title": "Oak Desk",
    "description": "Solid oak, oiled",
    "company_name": "Acme Workshop",
    "link": "https://example.com/desk",
    "image_url": "https://example.com/desk.jpg",
    "country": "Ireland",
    "material": ["Oak", "Steel"],
    "collection": "Furniture",
}


class TestProductEndpoints:
    """End-to-end tests for the product API.

    Business rules are covered in unit tests; these check the HTTP contract.
    """

    @pytest.mark.asyncio
    async def test_create_requires_auth(self, api_env):
        """Should return 401 without a session."""
        response = await api_env.client.post("/products", json=PRODUCT)

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_create_and_fetch(self, api_env):
        """New products start with score 1 and can be fetched."""
        # Arrange
        owner, headers = await api_env.create_user("owner")

        # Act
        created = await api_env.client.post("/products", json=PRODUCT, headers=headers)
        product_id = created.json()["product"]["product_id"]
        fetched = await api_env.client.get(f"/products/{product_id}")
        listed = await api_env.client.get("/products")

        # Assert
        assert created.status_code == 201
        assert created.json()["product"]["score"] == 1
        assert fetched.status_code == 200
        assert fetched.json()["product"]["user_id"] == owner.id
        assert [p["product_id"] for p in listed.json()["products"]] == [product_id]

    @pytest.mark.asyncio
    async def test_create_with_bad_link(self, api_env):
        """Should return 400 for a non-http link."""
        _, headers = await api_env.create_user("owner")

        response = await api_env.client.post(
            "/products",
            json={**PRODUCT, "link": "javascript:alert(1)"},
            headers=headers,
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_get_missing_product(self, api_env):
        """Should return 404 for an unknown product."""
        response = await api_env.client.get("/products/9999")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_owner_edits_product(self, api_env):
        """Owner can change descriptive fields."""
        # Arrange
        _, headers = await api_env.create_user("owner")
        created = await api_env.client.post("/products", json=PRODUCT, headers=headers)
        product_id = created.json()["product"]["product_id"]

        # Act
        response = await api_env.client.patch(
            f"/products/{product_id}", json={"title": "Oak Bureau"}, headers=headers
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["product"]["title"] == "Oak Bureau"
        assert response.json()["product"]["score"] == 1

    @pytest.mark.asyncio
    async def test_score_cannot_be_edited(self, api_env):
        """Sending score in an edit should be rejected."""
        # Arrange
        _, headers = await api_env.create_user("owner")
        created = await api_env.client.post("/products", json=PRODUCT, headers=headers)
        product_id = created.json()["product"]["product_id"]

        # Act
        response = await api_env.client.patch(
            f"/products/{product_id}", json={"score": 1000}, headers=headers
        )
        fetched = await api_env.client.get(f"/products/{product_id}")

        # Assert
        assert response.status_code == 422
        assert fetched.json()["product"]["score"] == 1

    @pytest.mark.asyncio
    async def test_owner_cannot_feature_own_product(self, api_env):
        """Featured placement is paid for, so an edit cannot set it."""
        # Arrange
        _, headers = await api_env.create_user("owner")
        created = await api_env.client.post("/products", json=PRODUCT, headers=headers)
        product_id = created.json()["product"]["product_id"]

        # Act
        response = await api_env.client.patch(
            f"/products/{product_id}", json={"featured": True}, headers=headers
        )
        fetched = await api_env.client.get(f"/products/{product_id}")

        # Assert
        assert response.status_code == 422
        assert fetched.json()["product"]["featured"] is False

    @pytest.mark.asyncio
    async def test_non_owner_cannot_edit_or_delete(self, api_env):
        """Should return 403 for another user's product."""
        # Arrange
        _, owner_headers = await api_env.create_user("owner")
        _, other_headers = await api_env.create_user("other")
        created = await api_env.client.post(
            "/products", json=PRODUCT, headers=owner_headers
        )
        product_id = created.json()["product"]["product_id"]

        # Act
        edit = await api_env.client.patch(
            f"/products/{product_id}", json={"title": "Stolen"}, headers=other_headers
        )
        delete = await api_env.client.delete(
            f"/products/{product_id}", headers=other_headers
        )

        # Assert
        assert edit.status_code == 403
        assert delete.status_code == 403

    @pytest.mark.asyncio
    async def test_delete_removes_comments(self, api_env):
        """Deleting a product should remove its discussion too."""
        # Arrange
        _, headers = await api_env.create_user("owner")
        created = await api_env.client.post("/products", json=PRODUCT, headers=headers)
        product_id = created.json()["product"]["product_id"]
        await api_env.client.post(
            f"/products/{product_id}/comments",
            json={"content": "First!"},
            headers=headers,
        )

        # Act
        response = await api_env.client.delete(
            f"/products/{product_id}", headers=headers
        )

        # Assert
        assert response.status_code == 200
        assert (await api_env.client.get(f"/products/{product_id}")).status_code == 404
        comments = await api_env.client.get(f"/products/{product_id}/comments")
        assert comments.json()["comments"] == []
