"""
Seed script for default global categories.
"""

import logging

from app.database import SessionLocal, init_db
from app.models import Category

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = [
    {"name": "Housing", "color": "#3b82f6", "icon": "home"},
    {"name": "Utilities", "color": "#0ea5e9", "icon": "zap"},
    {"name": "Groceries", "color": "#f59e0b", "icon": "shopping-cart"},
    {"name": "Restaurants", "color": "#f97316", "icon": "utensils"},
    {"name": "Transportation", "color": "#8b5cf6", "icon": "car"},
    {"name": "Health", "color": "#14b8a6", "icon": "heart-pulse"},
    {"name": "Shopping", "color": "#ec4899", "icon": "shopping-bag"},
    {"name": "Entertainment", "color": "#f43f5e", "icon": "tv"},
    {"name": "Subscriptions", "color": "#a855f7", "icon": "repeat"},
    {"name": "Travel", "color": "#06b6d4", "icon": "plane"},
    {"name": "Education", "color": "#6366f1", "icon": "graduation-cap"},
    {"name": "Other", "color": "#9ca3af", "icon": "circle"},
]


def seed_categories(db=None) -> int:
    """Insert the default global categories. Returns how many were added."""
    owns_session = db is None
    if owns_session:
        db = SessionLocal()

    try:
        existing_count = db.query(Category).filter(Category.user_id.is_(None)).count()
        if existing_count > 0:
            logger.info("Global categories already seeded (%d exist)", existing_count)
            return 0

        for data in DEFAULT_CATEGORIES:
            db.add(Category(user_id=None, **data))

        db.commit()
        logger.info("Seeded %d global categories", len(DEFAULT_CATEGORIES))
        return len(DEFAULT_CATEGORIES)

    except Exception:
        db.rollback()
        raise
    finally:
        if owns_session:
            db.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_db()
    seed_categories()
