"""Review routes."""
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import selectinload

from studio.database import get_db
from studio.logging_config import get_logger
from studio.models import Review, User
from studio.schemas.common import envelope, dump
from studio.schemas.review import ReviewCreate, ReviewUpdate, ReviewApproval, ReviewResponse
from studio.middleware.auth import get_current_user_required, require_admin, ensure_owner_or_admin
from studio.utils import MAX_PAGE, generate_id, paginate

router = APIRouter(prefix="/reviews", tags=["reviews"])
logger = get_logger("studio.reviews")


def _review_to_dict(r: Review) -> dict:
    return dump(ReviewResponse.model_validate(r))


def _find_review_by_author(user_id: str, db) -> Review | None:
    return db.query(Review).filter(Review.author_id == user_id).first()


def _get_review_or_404(review_id: str, db) -> Review:
    r = db.query(Review).filter(Review.id == review_id).first()
    if not r:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Review not found")
    return r


@router.get("")
def list_approved_reviews(
    db=Depends(get_db),
    page: int = Query(1, ge=1, le=MAX_PAGE),
    limit: int = Query(10, ge=1, le=100),
):
    """Approved reviews for the public testimonials page."""
    qry = (
        db.query(Review)
        .options(selectinload(Review.author))
        .filter(Review.is_approved == True)  # noqa: E712
        .order_by(Review.created_at.desc())
    )
    reviews, pagination = paginate(qry, page, limit)
    return envelope({"reviews": [_review_to_dict(r) for r in reviews], "pagination": pagination})


@router.get("/admin")
def list_all_reviews(
    user: User = Depends(require_admin),
    db=Depends(get_db),
    page: int = Query(1, ge=1, le=MAX_PAGE),
    limit: int = Query(10, ge=1, le=100),
    status_filter: str = Query("all", alias="status", pattern="^(all|pending|approved)$"),
):
    """Every review, optionally filtered by moderation status. Requires admin."""
    qry = db.query(Review).options(selectinload(Review.author))
    if status_filter == "pending":
        qry = qry.filter(Review.is_approved == False)  # noqa: E712
    elif status_filter == "approved":
        qry = qry.filter(Review.is_approved == True)  # noqa: E712
    reviews, pagination = paginate(qry.order_by(Review.created_at.desc()), page, limit)
    return envelope({"reviews": [_review_to_dict(r) for r in reviews], "pagination": pagination})


@router.get("/my")
def get_my_review(
    user: User = Depends(get_current_user_required),
    db=Depends(get_db),
):
    r = _find_review_by_author(user.id, db)
    return envelope({"review": _review_to_dict(r) if r else None})


@router.post("", status_code=status.HTTP_201_CREATED)
def create_review(
    data: ReviewCreate,
    user: User = Depends(get_current_user_required),
    db=Depends(get_db),
):
    if _find_review_by_author(user.id, db):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="You have already submitted a review",
        )
    r = Review(
        id=generate_id(),
        rating=data.rating,
        content=data.content,
        author_id=user.id,
        is_approved=False,
    )
    db.add(r)
    db.commit()
    db.refresh(r)
    logger.info("Review %s submitted by %s", r.id, user.id)
    return envelope({"review": _review_to_dict(r)}, "Review submitted successfully and pending approval")


@router.put("/{review_id}")
def update_review(
    review_id: str,
    data: ReviewUpdate,
    user: User = Depends(get_current_user_required),
    db=Depends(get_db),
):
    r = _get_review_or_404(review_id, db)
    ensure_owner_or_admin(r.author_id, user, "You can only edit your own review")
    if r.is_approved:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Cannot edit an approved review")
    if data.rating is not None:
        r.rating = data.rating
    if data.content is not None:
        r.content = data.content
    db.commit()
    db.refresh(r)
    return envelope({"review": _review_to_dict(r)}, "Review updated successfully")


@router.delete("/{review_id}")
def delete_review(
    review_id: str,
    user: User = Depends(get_current_user_required),
    db=Depends(get_db),
):
    r = _get_review_or_404(review_id, db)
    ensure_owner_or_admin(r.author_id, user, "You can only delete your own review")
    db.delete(r)
    db.commit()
    return envelope(message="Review deleted successfully")


@router.patch("/{review_id}/approve")
def moderate_review(
    review_id: str,
    data: ReviewApproval,
    user: User = Depends(require_admin),
    db=Depends(get_db),
):
    """Approve (isApproved=true) or reject (isApproved=false) a review. Requires admin."""
    r = _get_review_or_404(review_id, db)
    r.is_approved = data.is_approved
    db.commit()
    db.refresh(r)
    verdict = "approved" if data.is_approved else "rejected"
    logger.info("Review %s %s by %s", r.id, verdict, user.id)
    return envelope({"review": _review_to_dict(r)}, f"Review {verdict} successfully")
