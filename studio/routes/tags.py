"""Tag routes."""
from fastapi import APIRouter, Depends, HTTPException, status

from studio.database import get_db
from studio.models import Tag, User
from studio.schemas.common import envelope, dump
from studio.schemas.post import TagCreate, TagResponse
from studio.middleware.auth import require_admin
from studio.utils import generate_id

router = APIRouter(prefix="/tags", tags=["tags"])


@router.get("")
def list_tags(db=Depends(get_db)):
    tags = db.query(Tag).order_by(Tag.name.asc()).all()
    return envelope({"tags": [dump(TagResponse.model_validate(t)) for t in tags]})


@router.post("", status_code=status.HTTP_201_CREATED)
def create_tag(
    data: TagCreate,
    user: User = Depends(require_admin),
    db=Depends(get_db),
):
    if db.query(Tag).filter(Tag.name == data.name).first():
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Tag already exists")
    t = Tag(id=generate_id(), name=data.name, color=data.color)
    db.add(t)
    db.commit()
    db.refresh(t)
    return envelope({"tag": dump(TagResponse.model_validate(t))}, "Tag created successfully")


@router.delete("/{tag_id}")
def delete_tag(
    tag_id: str,
    user: User = Depends(require_admin),
    db=Depends(get_db),
):
    t = db.query(Tag).filter(Tag.id == tag_id).first()
    if not t:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Tag not found")
    db.delete(t)
    db.commit()
    return envelope(message="Tag deleted successfully")
