# storageperms/database/models/__init__.py

from storageperms.database.core.main import Base
from storageperms.database.models.media_index import MediaStoreFile
from storageperms.database.models.preference import Preference

__all__ = [
    "Base",
    "MediaStoreFile",
    "Preference",
]
