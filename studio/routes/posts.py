"""Blog post routes: posts, likes and comments."""
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import func, or_
from sqlalchemy.orm import selectinload

from studio.database import get_db
from studio.models import Post, Tag, Comment, Like, User
from studio.schemas.common import envelope, dump
from studio.schemas.post import (
    PostCreate,
    PostUpdate,
    PostResponse,
    PostDetailResponse,
    CommentCreate,
    CommentResponse,
)
from studio.middleware.auth import get_current_user, get_current_user_required, ensure_owner_or_admin
from studio.utils import MAX_PAGE, generate_id, paginate

router = APIRouter(prefix="/posts", tags=["posts"])


def _post_to_dict(p: Post, db, detail: bool = False) -> dict:
    likes = db.query(func.count(Like.user_id)).filter(Like.post_id == p.id).scalar() or 0
    comments = db.query(func.count(Comment.id)).filter(Comment.post_id == p.id).scalar() or 0
    schema = PostDetailResponse if detail else PostResponse
    out = schema.model_validate(p).model_copy(update={"like_count": likes, "comment_count": comments})
    return dump(out)


def _get_post_or_404(post_id: str, db) -> Post:
    p = db.query(Post).filter(Post.id == post_id).first()
    if not p:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")
    return p


def _resolve_tags(tag_ids: list[str], db) -> list[Tag]:
    unique_ids = set(tag_ids)
    tags = db.query(Tag).filter(Tag.id.in_(unique_ids)).all() if unique_ids else []
    if len(tags) != len(unique_ids):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid tag reference")
    return tags


def _listing_query(db):
    return db.query(Post).options(selectinload(Post.author), selectinload(Post.tags))


@router.get("")
def list_posts(
    db=Depends(get_db),
    page: int = Query(1, ge=1, le=MAX_PAGE),
    limit: int = Query(10, ge=1, le=100),
    search: str | None = Query(None, max_length=200),
    tag_id: str | None = Query(None, alias="tagId"),
):
    """Published posts, newest first."""
    qry = _listing_query(db).filter(Post.published == True)  # noqa: E712
    if search:
        pattern = f"%{search}%"
        qry = qry.filter(or_(Post.title.ilike(pattern), Post.content.ilike(pattern)))
    if tag_id:
        qry = qry.filter(Post.tags.any(Tag.id == tag_id))
    posts, pagination = paginate(qry.order_by(Post.created_at.desc()), page, limit)
    return envelope({"posts": [_post_to_dict(p, db) for p in posts], "pagination": pagination})


@router.get("/user/me")
def list_my_posts(
    user: User = Depends(get_current_user_required),
    db=Depends(get_db),
    page: int = Query(1, ge=1, le=MAX_PAGE),
    limit: int = Query(10, ge=1, le=100),
):
    """The caller's posts, drafts included."""
    qry = _listing_query(db).filter(Post.author_id == user.id).order_by(Post.created_at.desc())
    posts, pagination = paginate(qry, page, limit)
    return envelope({"posts": [_post_to_dict(p, db) for p in posts], "pagination": pagination})


@router.get("/{post_id}")
def get_post(
    post_id: str,
    db=Depends(get_db),
    user: User | None = Depends(get_current_user),
):
    p = db.query(Post).filter(Post.id == post_id).first()
    # Drafts are visible only to their author and admins
    if not p or (not p.published and not (user and (user.id == p.author_id or user.is_admin))):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")
    return envelope({"post": _post_to_dict(p, db, detail=True)})


@router.post("", status_code=status.HTTP_201_CREATED)
def create_post(
    data: PostCreate,
    user: User = Depends(get_current_user_required),
    db=Depends(get_db),
):
    p = Post(
        id=generate_id(),
        title=data.title,
        content=data.content,
        published=data.published,
        author_id=user.id,
    )
    if data.tag_ids:
        p.tags = _resolve_tags(data.tag_ids, db)
    db.add(p)
    db.commit()
    db.refresh(p)
    return envelope({"post": _post_to_dict(p, db)}, "Post created successfully")


@router.put("/{post_id}")
def update_post(
    post_id: str,
    data: PostUpdate,
    user: User = Depends(get_current_user_required),
    db=Depends(get_db),
):
    p = _get_post_or_404(post_id, db)
    ensure_owner_or_admin(p.author_id, user, "You can only edit your own posts")
    if data.title is not None:
        p.title = data.title
    if data.content is not None:
        p.content = data.content
    if data.published is not None:
        p.published = data.published
    if data.tag_ids is not None:
        p.tags = _resolve_tags(data.tag_ids, db)
    db.commit()
    db.refresh(p)
    return envelope({"post": _post_to_dict(p, db)}, "Post updated successfully")


@router.delete("/{post_id}")
def delete_post(
    post_id: str,
    user: User = Depends(get_current_user_required),
    db=Depends(get_db),
):
    p = _get_post_or_404(post_id, db)
    ensure_owner_or_admin(p.author_id, user, "You can only delete your own posts")
    db.delete(p)
    db.commit()
    return envelope(message="Post deleted successfully")


@router.post("/{post_id}/like")
def toggle_like(
    post_id: str,
    user: User = Depends(get_current_user_required),
    db=Depends(get_db),
):
    """Like the post, or remove the caller's like if it already exists."""
    _get_post_or_404(post_id, db)
    existing = db.query(Like).filter(Like.user_id == user.id, Like.post_id == post_id).first()
    if existing:
        db.delete(existing)
        db.commit()
        return envelope({"liked": False}, "Post unliked")
    db.add(Like(user_id=user.id, post_id=post_id))
    db.commit()
    return envelope({"liked": True}, "Post liked")


def _get_comment_or_404(post_id: str, comment_id: str, db) -> Comment:
    c = db.query(Comment).filter(Comment.id == comment_id, Comment.post_id == post_id).first()
    if not c:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Comment not found")
    return c


@router.post("/{post_id}/comments", status_code=status.HTTP_201_CREATED)
def add_comment(
    post_id: str,
    data: CommentCreate,
    user: User = Depends(get_current_user_required),
    db=Depends(get_db),
):
    p = _get_post_or_404(post_id, db)
    if not p.published and p.author_id != user.id and not user.is_admin:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")
    c = Comment(
        id=generate_id(),
        content=data.content,
        author_id=user.id,
        post_id=post_id,
    )
    db.add(c)
    db.commit()
    db.refresh(c)
    return envelope({"comment": dump(CommentResponse.model_validate(c))}, "Comment added successfully")


@router.put("/{post_id}/comments/{comment_id}")
def update_comment(
    post_id: str,
    comment_id: str,
    data: CommentCreate,
    user: User = Depends(get_current_user_required),
    db=Depends(get_db),
):
    c = _get_comment_or_404(post_id, comment_id, db)
    ensure_owner_or_admin(c.author_id, user, "You can only edit your own comments")
    c.content = data.content
    db.commit()
    db.refresh(c)
    return envelope({"comment": dump(CommentResponse.model_validate(c))}, "Comment updated successfully")


@router.delete("/{post_id}/comments/{comment_id}")
def delete_comment(
    post_id: str,
    comment_id: str,
    user: User = Depends(get_current_user_required),
    db=Depends(get_db),
):
    c = _get_comment_or_404(post_id, comment_id, db)
    ensure_owner_or_admin(c.author_id, user, "You can only delete your own comments")
    db.delete(c)
    db.commit()
    return envelope(message="Comment deleted successfully")
