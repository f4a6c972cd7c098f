"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Malformed input (empty content, out-of-range vote, dangling parent)."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NotAuthenticatedError(DomainError):
    """Raised when a write is attempted without a session."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Authentication required to {action}")


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class SelfVoteError(NotAuthorizedError):
    """Raised when a product owner votes on their own product."""

    def __init__(self, product_id: str, user_id: str):
        DomainError.__init__(self, "Cannot vote on your own product")
        self.product_id = product_id
        self.user_id = user_id


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class CommentHasRepliesError(BusinessRuleViolationError):
    """Raised when deleting a comment that still has replies."""

    def __init__(self, comment_id: str, reply_count: int):
        self.comment_id = comment_id
        self.reply_count = reply_count
        super().__init__(
            f"Cannot delete comment {comment_id}: it has {reply_count} "
            f"{'reply' if reply_count == 1 else 'replies'}"
        )


class UsernameTakenError(BusinessRuleViolationError):
    """Raised when a username is already in use by another user."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"Username already taken: {username}")
