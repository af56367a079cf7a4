"""
Storage factory
"""
import logging

from students_api.core.config import Settings
from students_api.storage.base import IStudentStorage
from students_api.storage.sqlite import SqliteStorage

logger = logging.getLogger(__name__)


def create_storage(settings: Settings) -> IStudentStorage:
    """
    Build the student store described by ``settings``.

    Raises:
        InitializationError: the store could not be opened or prepared
    """
    storage = SqliteStorage(settings.STORAGE_PATH, echo=settings.DB_ECHO_SQL)
    logger.info(
        f"Storage initialized (env={settings.ENV}, version={settings.APP_VERSION}, "
        f"path={settings.STORAGE_PATH})"
    )
    return storage
