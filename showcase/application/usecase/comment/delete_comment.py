"""Delete comment use case."""

from pydantic import BaseModel

from showcase.application.usecase.base import BaseUseCase, require_user
from showcase.domain.error import NotAuthorizedError, NotFoundError
from showcase.domain.service import CommentService
from showcase.domain.value import CommentId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    acting_user_id: int | None = None
    comment_id: int


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: int
    deleted: bool = True


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting a comment without replies."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotAuthenticatedError: If anonymous
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the user did not write the comment
            CommentHasRepliesError: If the comment has replies
        """
        user_id = require_user(request.acting_user_id, "delete a comment")
        comment_id = CommentId(request.comment_id)

        comment = await self.comment_service.get_comment_by_id(comment_id)
        if comment is None:
            raise NotFoundError("Comment", str(request.comment_id))

        if comment.user_id != user_id:
            raise NotAuthorizedError("comment", str(comment_id), str(user_id))

        await self.comment_service.delete_comment(comment)
        return DeleteCommentResponse(comment_id=comment_id)
