"""Domain layer DI providers."""

from dishka import Scope, provide

from showcase.config import AuthSettings, CommentSettings
from showcase.domain.repository import (
    CommentRepository,
    ProductRepository,
    UserRepository,
    VoteRepository,
)
from showcase.domain.service import (
    CommentService,
    FacetService,
    JWTService,
    NewsletterClient,
    ProductService,
    UserService,
    VoteService,
)
from showcase.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_product_service(
        self, product_repository: ProductRepository
    ) -> ProductService:
        """Provide product domain service."""
        return ProductService(product_repository=product_repository)

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        product_service: ProductService,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            product_service=product_service,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        comment_settings: CommentSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            max_depth=comment_settings.max_depth,
        )

    @provide
    def get_facet_service(self) -> FacetService:
        """Provide facet domain service."""
        return FacetService()

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        newsletter_client: NewsletterClient,
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository,
            newsletter_client=newsletter_client,
        )
