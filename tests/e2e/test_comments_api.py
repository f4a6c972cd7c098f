"""End-to-end tests for comment endpoints."""

import pytest

from tests.harness import create_api_fixture

api_env = create_api_fixture()

PRODUCT = {
    "title": "Wool Rug",
    "description": "Hand-knotted",
    "company_name": "Weft",
    "link": "https://example.com/rug",
    "image_url": "https://example.com/rug.jpg",
    "country": "Morocco",
    "material": ["Wool"],
    "collection": "Textiles",
}


async def _create_product(api_env, headers) -> int:
    response = await api_env.client.post("/products", json=PRODUCT, headers=headers)
    return response.json()["product"]["product_id"]


async def _comment(api_env, product_id, headers, content="Nice", parent_id=None):
    return await api_env.client.post(
        f"/products/{product_id}/comments",
        json={"content": content, "parent_id": parent_id},
        headers=headers,
    )


class TestCommentEndpoints:
    """End-to-end tests for the comment API."""

    @pytest.mark.asyncio
    async def test_blank_comment_rejected(self, api_env):
        """Should return 400 for whitespace-only content."""
        _, headers = await api_env.create_user("author")
        product_id = await _create_product(api_env, headers)

        response = await _comment(api_env, product_id, headers, content="   ")

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_blank_comment_on_missing_product(self, api_env):
        """Content is validated before the product lookup."""
        _, headers = await api_env.create_user("author")

        response = await _comment(api_env, 31337, headers, content="   ")

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_comment_requires_auth(self, api_env):
        """Should return 401 without a session."""
        _, headers = await api_env.create_user("author")
        product_id = await _create_product(api_env, headers)

        response = await _comment(api_env, product_id, {})

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_reply_parent_checks(self, api_env):
        """Missing parents are 404, parents on other products are 400."""
        # Arrange
        _, headers = await api_env.create_user("author")
        first = await _create_product(api_env, headers)
        second = await _create_product(api_env, headers)
        parent = await _comment(api_env, second, headers)
        parent_id = parent.json()["comment"]["comment_id"]

        # Act
        missing = await _comment(api_env, first, headers, parent_id=9999)
        cross = await _comment(api_env, first, headers, parent_id=parent_id)

        # Assert
        assert missing.status_code == 404
        assert cross.status_code == 400

    @pytest.mark.asyncio
    async def test_tree_is_depth_bounded(self, api_env):
        """Tree shows six levels; the flat list shows every comment."""
        # Arrange
        _, headers = await api_env.create_user("author")
        product_id = await _create_product(api_env, headers)
        parent_id = None
        for i in range(10):
            response = await _comment(
                api_env, product_id, headers, content=f"Level {i}", parent_id=parent_id
            )
            assert response.status_code == 201
            parent_id = response.json()["comment"]["comment_id"]

        # Act
        tree = await api_env.client.get(f"/products/{product_id}/comments/tree")
        flat = await api_env.client.get(f"/products/{product_id}/comments")

        # Assert
        assert len(flat.json()["comments"]) == 10

        node = tree.json()["comments"][0]
        depths = [node["depth"]]
        while node["replies"]:
            node = node["replies"][0]
            depths.append(node["depth"])
        assert depths == [0, 1, 2, 3, 4, 5]

    @pytest.mark.asyncio
    async def test_edit_and_delete(self, api_env):
        """Authors edit their comments; replies block deletion."""
        # Arrange
        _, author = await api_env.create_user("author")
        _, other = await api_env.create_user("other")
        product_id = await _create_product(api_env, author)
        created = await _comment(api_env, product_id, author, content="Tpyo")
        comment_id = created.json()["comment"]["comment_id"]
        await _comment(
            api_env, product_id, other, content="Reply", parent_id=comment_id
        )

        # Act
        edited = await api_env.client.patch(
            f"/comments/{comment_id}", json={"content": "Typo"}, headers=author
        )
        forbidden = await api_env.client.patch(
            f"/comments/{comment_id}", json={"content": "Mine"}, headers=other
        )
        blocked = await api_env.client.delete(f"/comments/{comment_id}", headers=author)

        # Assert
        assert edited.status_code == 200
        assert edited.json()["comment"]["content"] == "Typo"
        assert forbidden.status_code == 403
        assert blocked.status_code == 409
