"""Post routes.

Errors are returned as bare ``{key: message}`` maps. Unexpected failures
(store connectivity, serialization) are reported as a generic 400.
"""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel

from agora.application.usecase.comment import (
    AddCommentRequest,
    AddCommentUseCase,
    RemoveCommentRequest,
    RemoveCommentUseCase,
)
from agora.application.usecase.like import (
    AddLikeRequest,
    AddLikeUseCase,
    RemoveLikeRequest,
    RemoveLikeUseCase,
)
from agora.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
    PostResponse,
)
from agora.domain.error import (
    AuthorizationError,
    CommentNotFoundError,
    DuplicateLikeError,
    LikeNotFoundError,
    NotFoundError,
    ValidationError,
)
from agora.domain.service import JWTService
from agora.interface.error import APIError

router = APIRouter(prefix="/api/posts", tags=["posts"], route_class=DishkaRoute)

bearer_scheme = HTTPBearer(auto_error=False)

STORE_ERROR = {"error": "Error while fetch data"}


class PostContentAPIRequest(BaseModel):
    """API request body for creating a post or a comment.

    Text rules are enforced by the domain so that failures come back as
    a field -> message map.
    """

    text: str | None = None
    name: str | None = None
    avatar: str | None = None


def _require_user_id(
    jwt_service: JWTService, credentials: HTTPAuthorizationCredentials | None
) -> str:
    """Resolve the acting user's ID from the bearer token.

    Raises:
        APIError: 401 if the token is missing or invalid
    """
    token = credentials.credentials if credentials else None
    user_id = jwt_service.get_user_id_from_token(token)
    if not user_id:
        raise APIError(
            status.HTTP_401_UNAUTHORIZED,
            {"unauthorized": "Authentication required"},
        )
    return user_id


@router.get("", response_model=list[PostResponse])
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
) -> list[PostResponse]:
    """List all posts, newest first.

    Returns:
        List of posts (possibly empty)
    """
    try:
        return await list_posts_use_case.execute(ListPostsRequest())
    except Exception as e:
        logfire.error("Unexpected error listing posts", error=str(e))
        raise APIError(status.HTTP_400_BAD_REQUEST, STORE_ERROR)


@router.get("/test")
async def posts_test() -> dict[str, str]:
    """Smoke check for the posts router."""
    return {"msg": "posts api works"}


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: str,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> PostResponse:
    """Get a post by ID.

    Args:
        post_id: Post UUID
        get_post_use_case: Get post use case from DI

    Returns:
        Post details

    Raises:
        APIError: 404 if the post does not exist
    """
    try:
        return await get_post_use_case.execute(GetPostRequest(post_id=post_id))
    except NotFoundError:
        logfire.warn("Post not found", post_id=post_id)
        raise APIError(
            status.HTTP_404_NOT_FOUND, {"nopostfound": "No post found with that id"}
        )
    except Exception as e:
        logfire.error("Unexpected error fetching post", post_id=post_id, error=str(e))
        raise APIError(status.HTTP_400_BAD_REQUEST, STORE_ERROR)


@router.post("", response_model=PostResponse)
async def create_post(
    request: PostContentAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> PostResponse:
    """Create a new post.

    Requires authentication.

    Args:
        request: Post text and author display data
        create_post_use_case: Create post use case from DI
        jwt_service: JWT service for token verification (injected)
        credentials: Bearer token

    Returns:
        Created post

    Raises:
        APIError: 401 if not authenticated, 400 if validation fails
    """
    user_id = _require_user_id(jwt_service, credentials)

    try:
        return await create_post_use_case.execute(
            CreatePostRequest(
                author_id=user_id,
                text=request.text,
                name=request.name,
                avatar=request.avatar,
            )
        )
    except ValidationError as e:
        logfire.warn("Post creation validation error", errors=e.errors)
        raise APIError(status.HTTP_400_BAD_REQUEST, e.errors)
    except Exception as e:
        logfire.error("Unexpected error creating post", error=str(e))
        raise APIError(status.HTTP_400_BAD_REQUEST, STORE_ERROR)


@router.delete("/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: str,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> DeletePostResponse:
    """Delete a post. Only the author may delete it.

    Raises:
        APIError: 401 if not authenticated or not the owner, 404 if not found
    """
    user_id = _require_user_id(jwt_service, credentials)

    try:
        return await delete_post_use_case.execute(
            DeletePostRequest(post_id=post_id, user_id=user_id)
        )
    except NotFoundError:
        logfire.warn("Delete of non-existent post", post_id=post_id)
        raise APIError(
            status.HTTP_404_NOT_FOUND, {"postnotfound": "No post found with that id"}
        )
    except AuthorizationError as e:
        logfire.warn("Unauthorized post deletion attempt", error=str(e))
        raise APIError(
            status.HTTP_401_UNAUTHORIZED,
            {"notauth": "User not authorized to delete this post"},
        )
    except Exception as e:
        logfire.error("Unexpected error deleting post", post_id=post_id, error=str(e))
        raise APIError(status.HTTP_400_BAD_REQUEST, STORE_ERROR)


@router.post("/like/{post_id}", response_model=PostResponse)
async def like_post(
    post_id: str,
    add_like_use_case: FromDishka[AddLikeUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> PostResponse:
    """Like a post.

    Raises:
        APIError: 401 if not authenticated, 404 if not found, 400 if already liked
    """
    user_id = _require_user_id(jwt_service, credentials)

    try:
        return await add_like_use_case.execute(
            AddLikeRequest(post_id=post_id, user_id=user_id)
        )
    except NotFoundError:
        raise APIError(status.HTTP_404_NOT_FOUND, {"postnotfound": "No post found"})
    except DuplicateLikeError as e:
        logfire.warn("Duplicate like attempt", error=str(e))
        raise APIError(
            status.HTTP_400_BAD_REQUEST,
            {"alreadyliked": "User already liked this post"},
        )
    except Exception as e:
        logfire.error("Unexpected error liking post", post_id=post_id, error=str(e))
        raise APIError(status.HTTP_400_BAD_REQUEST, STORE_ERROR)


@router.post("/unlike/{post_id}", response_model=PostResponse)
async def unlike_post(
    post_id: str,
    remove_like_use_case: FromDishka[RemoveLikeUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> PostResponse:
    """Remove the current user's like from a post.

    Raises:
        APIError: 401 if not authenticated, 404 if not found, 400 if not liked
    """
    user_id = _require_user_id(jwt_service, credentials)

    try:
        return await remove_like_use_case.execute(
            RemoveLikeRequest(post_id=post_id, user_id=user_id)
        )
    except NotFoundError:
        raise APIError(status.HTTP_404_NOT_FOUND, {"postnotfound": "No post found"})
    except LikeNotFoundError as e:
        logfire.warn("Unlike without like", error=str(e))
        raise APIError(
            status.HTTP_400_BAD_REQUEST,
            {"notliked": "You have not yet liked this post"},
        )
    except Exception as e:
        logfire.error("Unexpected error unliking post", post_id=post_id, error=str(e))
        raise APIError(status.HTTP_400_BAD_REQUEST, STORE_ERROR)


@router.post("/comment/{post_id}", response_model=PostResponse)
async def add_comment(
    post_id: str,
    request: PostContentAPIRequest,
    add_comment_use_case: FromDishka[AddCommentUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> PostResponse:
    """Add a comment to a post.

    Raises:
        APIError: 401 if not authenticated, 400 if validation fails,
            404 if the post does not exist
    """
    user_id = _require_user_id(jwt_service, credentials)

    try:
        return await add_comment_use_case.execute(
            AddCommentRequest(
                post_id=post_id,
                user_id=user_id,
                text=request.text,
                name=request.name,
                avatar=request.avatar,
            )
        )
    except ValidationError as e:
        logfire.warn("Comment validation error", errors=e.errors)
        raise APIError(status.HTTP_400_BAD_REQUEST, e.errors)
    except NotFoundError:
        raise APIError(status.HTTP_404_NOT_FOUND, {"postnotfound": "No post found"})
    except Exception as e:
        logfire.error("Unexpected error adding comment", post_id=post_id, error=str(e))
        raise APIError(status.HTTP_400_BAD_REQUEST, STORE_ERROR)


@router.delete("/comment/{post_id}/{comment_id}", response_model=PostResponse)
async def remove_comment(
    post_id: str,
    comment_id: str,
    remove_comment_use_case: FromDishka[RemoveCommentUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> PostResponse:
    """Remove a comment from a post.

    Raises:
        APIError: 401 if not authenticated (or not allowed, when comment
            deletion is restricted), 404 if the post or comment is missing
    """
    user_id = _require_user_id(jwt_service, credentials)

    try:
        return await remove_comment_use_case.execute(
            RemoveCommentRequest(
                post_id=post_id, comment_id=comment_id, user_id=user_id
            )
        )
    except CommentNotFoundError:
        logfire.warn("Comment not found", post_id=post_id, comment_id=comment_id)
        raise APIError(
            status.HTTP_404_NOT_FOUND, {"commentnotexists": "Comment does not exist"}
        )
    except NotFoundError:
        raise APIError(status.HTTP_404_NOT_FOUND, {"postnotfound": "No post found"})
    except AuthorizationError as e:
        logfire.warn("Unauthorized comment deletion attempt", error=str(e))
        raise APIError(
            status.HTTP_401_UNAUTHORIZED,
            {"notauth": "User not authorized to delete this comment"},
        )
    except Exception as e:
        logfire.error(
            "Unexpected error removing comment", post_id=post_id, error=str(e)
        )
        raise APIError(status.HTTP_400_BAD_REQUEST, STORE_ERROR)
