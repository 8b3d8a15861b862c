"""
Database module - Motor client with Beanie-managed models and indexes.

Usage:
    from common.database import MongoDB

    main_db = MongoDB()
    await main_db.connect(uri, database_name, models)
    users = main_db.db["users"]
"""

from common.database.mongodb import MongoDB, mask_uri
from common.database.base_document import BaseDocument, utcnow

__all__ = [
    "MongoDB",
    "mask_uri",
    "BaseDocument",
    "utcnow",
]
