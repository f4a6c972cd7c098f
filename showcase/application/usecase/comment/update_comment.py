"""Update comment use case."""

from pydantic import BaseModel, Field

from showcase.application.usecase.base import BaseUseCase, require_user
from showcase.domain.error import NotAuthorizedError, NotFoundError
from showcase.domain.service import CommentService
from showcase.domain.value import CommentId

from .get_comments import CommentItem


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    acting_user_id: int | None = None
    comment_id: int
    content: str = Field(max_length=10000)


class UpdateCommentResponse(BaseModel):
    """Update comment response."""

    comment: CommentItem


class UpdateCommentUseCase(BaseUseCase):
    """Use case for editing a comment's content."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Raises:
            NotAuthenticatedError: If anonymous
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the user did not write the comment
            ValidationError: If the new content is blank
        """
        user_id = require_user(request.acting_user_id, "edit a comment")
        comment_id = CommentId(request.comment_id)

        comment = await self.comment_service.get_comment_by_id(comment_id)
        if comment is None:
            raise NotFoundError("Comment", str(request.comment_id))

        if comment.user_id != user_id:
            raise NotAuthorizedError("comment", str(comment_id), str(user_id))

        updated = await self.comment_service.update_content(comment, request.content)
        return UpdateCommentResponse(comment=CommentItem.from_comment(updated))
