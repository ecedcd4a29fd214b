"""
Document database layer for wordboard.

Structure:
- entities/: Board document models, one per collection
- repositories/: Data access layer, one repository per collection
- errors.py: Repository errors mapped onto HTTP responses by the server
- session.py: Global client lifecycle and the database dependency
- utils.py: Client construction helpers
"""

from .errors import BoardAlreadyExistsError, BoardNotFoundError, RepositoryError
from .session import close_db, get_client, get_database, init_db
from .utils import create_client, ping

__all__ = [
    "BoardAlreadyExistsError",
    "BoardNotFoundError",
    "RepositoryError",
    "close_db",
    "create_client",
    "get_client",
    "get_database",
    "init_db",
    "ping",
]
