"""SQLAlchemy table definitions for Showcase.

Core tables used by the repositories. They match the schema defined in
Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("username", String(50), nullable=False),
    Column("email", String(255), nullable=True),
    Column("avatar_url", Text, nullable=True),
    Column(
        "is_subscribed_to_newsletter",
        Boolean,
        nullable=False,
        server_default="false",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("username", name="uq_users_username"),
)

Index("idx_users_email", users_table.c.email)

# ============================================================================
# PRODUCTS TABLE
# ============================================================================
products_table = Table(
    "products",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(300), nullable=False),
    Column("description", Text, nullable=False, server_default=""),
    Column("company_name", String(300), nullable=False),
    Column("link", Text, nullable=False),
    Column("image_url", Text, nullable=False),
    Column("country", String(100), nullable=False),
    Column("material", ARRAY(Text), nullable=False, server_default="{}"),
    Column("collection", String(100), nullable=False),
    Column(
        "user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("score", Integer, nullable=False, server_default="0"),
    Column("featured", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("score >= 0", name="score_non_negative"),
)

Index("idx_products_created_at", products_table.c.created_at.desc())
Index("idx_products_user_id", products_table.c.user_id)
Index("idx_products_country", products_table.c.country)
Index("idx_products_collection", products_table.c.collection)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "product_id",
        Integer,
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("value", Integer, nullable=False, server_default="1"),
    UniqueConstraint("user_id", "product_id", name="uq_vote_user_product"),
    CheckConstraint("value IN (0, 1)", name="vote_value_range"),
)

Index("idx_votes_product_id", votes_table.c.product_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("content", Text, nullable=False),
    Column(
        "user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "product_id",
        Integer,
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
    ),
    # No cascade: a comment with replies cannot be deleted. The check runs at
    # statement end, so deleting a whole thread in one statement still works.
    Column("parent_id", Integer, ForeignKey("comments.id"), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_comments_product_id", comments_table.c.product_id)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_user_id", comments_table.c.user_id)
Index("idx_comments_created_at", comments_table.c.created_at)
