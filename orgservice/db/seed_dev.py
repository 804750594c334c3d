"""Dev seeding helper - creates the user organizations are created for."""

import logging

from orgservice.config import Settings, get_settings
from orgservice.db.mongo import MongoDocumentStore
from orgservice.db.store import DocumentStore
from orgservice.models.user import User
from orgservice.utils.logging import configure_logging

logger = logging.getLogger(__name__)

DEV_USER_EMAIL = "dev@example.com"


def seed_dev_user(store: DocumentStore, settings: Settings, email: str = DEV_USER_EMAIL) -> bool:
    """Seed a verified, active user.

    This function is idempotent - safe to run multiple times.

    Returns:
        True if the user was created, False if it already existed
    """
    existing = store.find_one(settings.users_collection, {"email": email})
    if existing is not None:
        logger.info("Dev user already exists: %s", email)
        return False

    user = User(email=email, is_verified=True, deactivated=False)
    user_id = store.insert_one(
        settings.users_collection, user.model_dump(exclude={"id"})
    )
    logger.info("Created dev user %s with id %s", email, user_id)
    return True


if __name__ == "__main__":
    settings = get_settings()
    configure_logging(settings.log_level)
    seed_dev_user(MongoDocumentStore.from_settings(settings), settings)
