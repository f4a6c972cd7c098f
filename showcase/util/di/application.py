"""Application layer DI providers."""

from dishka import Scope, provide

from showcase.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentTreeUseCase,
    GetCommentsUseCase,
    UpdateCommentUseCase,
)
from showcase.application.usecase.facet import (
    GetFacetCountsUseCase,
    ListFacetProductsUseCase,
)
from showcase.application.usecase.newsletter import SubscribeNewsletterUseCase
from showcase.application.usecase.product import (
    CreateProductUseCase,
    DeleteProductUseCase,
    GetProductUseCase,
    ListProductsUseCase,
    UpdateProductUseCase,
)
from showcase.application.usecase.user import (
    GetUserProfileUseCase,
    UpdateUserProfileUseCase,
)
from showcase.application.usecase.vote import (
    CastVoteUseCase,
    GetVoteUseCase,
    ListVotesUseCase,
)
from showcase.domain.service import (
    CommentService,
    FacetService,
    ProductService,
    UserService,
    VoteService,
)
from showcase.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Product use cases
    @provide
    def get_create_product_use_case(
        self, product_service: ProductService, vote_service: VoteService
    ) -> CreateProductUseCase:
        """Provide create product use case."""
        return CreateProductUseCase(
            product_service=product_service, vote_service=vote_service
        )

    @provide
    def get_get_product_use_case(
        self, product_service: ProductService
    ) -> GetProductUseCase:
        """Provide get product use case."""
        return GetProductUseCase(product_service=product_service)

    @provide
    def get_list_products_use_case(
        self, product_service: ProductService
    ) -> ListProductsUseCase:
        """Provide list products use case."""
        return ListProductsUseCase(product_service=product_service)

    @provide
    def get_update_product_use_case(
        self, product_service: ProductService
    ) -> UpdateProductUseCase:
        """Provide update product use case."""
        return UpdateProductUseCase(product_service=product_service)

    @provide
    def get_delete_product_use_case(
        self,
        product_service: ProductService,
        vote_service: VoteService,
        comment_service: CommentService,
    ) -> DeleteProductUseCase:
        """Provide delete product use case."""
        return DeleteProductUseCase(
            product_service=product_service,
            vote_service=vote_service,
            comment_service=comment_service,
        )

    # Vote use cases
    @provide
    def get_cast_vote_use_case(
        self, vote_service: VoteService, product_service: ProductService
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(
            vote_service=vote_service, product_service=product_service
        )

    @provide
    def get_get_vote_use_case(self, vote_service: VoteService) -> GetVoteUseCase:
        """Provide get vote use case."""
        return GetVoteUseCase(vote_service=vote_service)

    @provide
    def get_list_votes_use_case(self, vote_service: VoteService) -> ListVotesUseCase:
        """Provide list votes use case."""
        return ListVotesUseCase(vote_service=vote_service)

    # Comment use cases
    @provide
    def get_create_comment_use_case(
        self, comment_service: CommentService, product_service: ProductService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service, product_service=product_service
        )

    @provide
    def get_get_comments_use_case(
        self, comment_service: CommentService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(comment_service=comment_service)

    @provide
    def get_get_comment_tree_use_case(
        self, comment_service: CommentService
    ) -> GetCommentTreeUseCase:
        """Provide get comment tree use case."""
        return GetCommentTreeUseCase(comment_service=comment_service)

    @provide
    def get_update_comment_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_service=comment_service)

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Facet use cases
    @provide
    def get_get_facet_counts_use_case(
        self, facet_service: FacetService, product_service: ProductService
    ) -> GetFacetCountsUseCase:
        """Provide get facet counts use case."""
        return GetFacetCountsUseCase(
            facet_service=facet_service, product_service=product_service
        )

    @provide
    def get_list_facet_products_use_case(
        self, facet_service: FacetService, product_service: ProductService
    ) -> ListFacetProductsUseCase:
        """Provide list facet products use case."""
        return ListFacetProductsUseCase(
            facet_service=facet_service, product_service=product_service
        )

    # User use cases
    @provide
    def get_get_user_profile_use_case(
        self, user_service: UserService
    ) -> GetUserProfileUseCase:
        """Provide get user profile use case."""
        return GetUserProfileUseCase(user_service=user_service)

    @provide
    def get_update_user_profile_use_case(
        self, user_service: UserService
    ) -> UpdateUserProfileUseCase:
        """Provide update user profile use case."""
        return UpdateUserProfileUseCase(user_service=user_service)

    # Newsletter use cases
    @provide
    def get_subscribe_newsletter_use_case(
        self, user_service: UserService
    ) -> SubscribeNewsletterUseCase:
        """Provide public newsletter signup use case."""
        return SubscribeNewsletterUseCase(user_service=user_service)
