"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Field-level input validation error.

    Attributes:
        errors: Mapping of field name to error message
    """

    def __init__(self, errors: dict[str, str]):
        self.errors = dict(errors)
        super().__init__(
            "; ".join(f"{field}: {message}" for field, message in self.errors.items())
        )


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class CommentNotFoundError(NotFoundError):
    """Raised when a comment is not present on its post."""

    def __init__(self, post_id: str, comment_id: str):
        self.post_id = post_id
        super().__init__("Comment", comment_id)


class AuthorizationError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to delete {resource} {resource_id}"
        )


class DuplicateLikeError(BusinessRuleViolationError):
    """Raised when a user likes a post they already liked."""

    def __init__(self, post_id: str, user_id: str):
        self.post_id = post_id
        self.user_id = user_id
        super().__init__(f"User {user_id} already liked post {post_id}")


class LikeNotFoundError(BusinessRuleViolationError):
    """Raised when a user unlikes a post they have not liked."""

    def __init__(self, post_id: str, user_id: str):
        self.post_id = post_id
        self.user_id = user_id
        super().__init__(f"User {user_id} has not liked post {post_id}")
