"""Seed script to populate initial data for development."""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from studio.database import SessionLocal, init_db
from studio.models import User, Post, Tag, Review
from studio.services.auth import get_password_hash
from studio.utils import generate_id

TAGS = [
    ("Web Design", "#6366f1"),
    ("Development", "#10b981"),
    ("Branding", "#f59e0b"),
    ("Case Study", "#ef4444"),
]


def seed():
    init_db()
    db = SessionLocal()
    try:
        if db.query(User).first():
            print("Database already seeded.")
            return
        user = User(
            id=generate_id(),
            email="demo@studio.dev",
            username="demo_client",
            hashed_password=get_password_hash("demo123"),
            first_name="Demo",
            last_name="Client",
        )
        db.add(user)
        tags = [Tag(id=generate_id(), name=name, color=color) for name, color in TAGS]
        db.add_all(tags)
        db.add(Post(
            id=generate_id(),
            title="How we rebuilt a bakery's storefront in two weeks",
            content=(
                "A landing page, an online menu and a contact form: the smallest "
                "package that still moves the needle for a local business."
            ),
            published=True,
            author_id=user.id,
            tags=[tags[0], tags[3]],
        ))
        db.add(Review(
            id=generate_id(),
            rating=5,
            content="Fast turnaround and a site our customers actually use.",
            author_id=user.id,
            is_approved=True,
        ))
        db.commit()
        print("Seed complete. User: demo@studio.dev / demo123")
    finally:
        db.close()

if __name__ == "__main__":
    seed()
