# ===== apps/users/services.py =====
import logging
import uuid

from .models import UserSettings

logger = logging.getLogger(__name__)


def bootstrap_identity(candidate=None):
    """
    Return (user_id, created).

    A known candidate comes back unchanged. Anything else (missing, unknown,
    garbage) gets a fresh UUID4 with a default settings row.
    """
    if candidate and UserSettings.objects.filter(user_id=candidate).exists():
        return candidate, False

    user_id = str(uuid.uuid4())
    UserSettings.objects.create(user_id=user_id)
    logger.info(f"Created user {user_id}")
    return user_id, True
