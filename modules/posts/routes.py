"""
Post API endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from api.middleware.auth import get_current_user
from api.dependencies import get_post_service
from shared.models import AuthenticatedUser

from .interfaces import IPostService
from .models import (
    Comment,
    CommentRequest,
    CreatePostRequest,
    Post,
    PostWithAuthor,
    ProfilePostsResponse,
    ReactionRequest,
    Report,
    ReportRequest,
    ShareResponse,
    UpdatePostRequest,
)
from .exceptions import PostAccessDeniedError

router = APIRouter()


@router.post("", response_model=Post, status_code=201)
async def create_post(
    request: CreatePostRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> Post:
    return await service.create_post(user.id, request)


@router.get("/user/{author_id}", response_model=ProfilePostsResponse)
async def list_profile_posts(
    author_id: str,
    cursor: Optional[str] = Query(default=None),
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> ProfilePostsResponse:
    """Page through one author's posts visible to the caller."""
    return await service.list_profile_posts(author_id, user.id, cursor)


@router.get("/{post_id}", response_model=PostWithAuthor)
async def get_post(
    post_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> PostWithAuthor:
    # Posts the caller may not see are reported as missing
    try:
        post = await service.get_post(post_id, user.id)
    except PostAccessDeniedError:
        post = None
    if post is None:
        raise HTTPException(status_code=404, detail="Post not found")
    return post


@router.patch("/{post_id}", response_model=Post)
async def update_post(
    post_id: str,
    request: UpdatePostRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> Post:
    return await service.update_post(post_id, user.id, request)


@router.delete("/{post_id}", status_code=204)
async def delete_post(
    post_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> None:
    await service.delete_post(post_id, user.id)


@router.post("/{post_id}/comments", response_model=Comment, status_code=201)
async def add_comment(
    post_id: str,
    request: CommentRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> Comment:
    return await service.add_comment(post_id, user.id, request.content)


@router.patch("/{post_id}/comments/{comment_id}", response_model=Comment)
async def update_comment(
    post_id: str,
    comment_id: str,
    request: CommentRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> Comment:
    return await service.update_comment(post_id, comment_id, user.id, request.content)


@router.delete("/{post_id}/comments/{comment_id}", status_code=204)
async def delete_comment(
    post_id: str,
    comment_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> None:
    await service.delete_comment(post_id, comment_id, user.id)


@router.put("/{post_id}/reactions", response_model=Post)
async def set_reaction(
    post_id: str,
    request: ReactionRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> Post:
    return await service.add_reaction(post_id, user.id, request.type)


@router.delete("/{post_id}/reactions", response_model=Post)
async def remove_reaction(
    post_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> Post:
    return await service.remove_reaction(post_id, user.id)


@router.post("/{post_id}/reactions/toggle", response_model=Post)
async def toggle_reaction(
    post_id: str,
    request: ReactionRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> Post:
    return await service.toggle_reaction(post_id, user.id, request.type)


@router.post("/{post_id}/share", response_model=ShareResponse)
async def share_post(
    post_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> ShareResponse:
    return ShareResponse(shares=await service.share_post(post_id, user.id))


@router.post("/{post_id}/report", response_model=Report, status_code=201)
async def report_post(
    post_id: str,
    request: ReportRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPostService = Depends(get_post_service),
) -> Report:
    return await service.report_post(post_id, user.id, request.reason)
