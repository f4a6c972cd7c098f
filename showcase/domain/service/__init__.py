"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .comment_tree import CommentNode, build_comment_tree
from .facet_service import FacetService, compute_facet_counts, filter_products_by_facet
from .jwt_service import JWTService
from .product_service import ProductService
from .user_service import NewsletterClient, UserService
from .vote_service import VoteService

__all__ = [
    "CommentNode",
    "CommentService",
    "FacetService",
    "JWTService",
    "NewsletterClient",
    "ProductService",
    "Service",
    "UserService",
    "VoteService",
    "build_comment_tree",
    "compute_facet_counts",
    "filter_products_by_facet",
]
