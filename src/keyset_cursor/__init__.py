"""
keyset_cursor – keyset (cursor) pagination predicates for SQLAlchemy.

Import path convention::

    from keyset_cursor.application.pagination import with_cursor_pagination
    from keyset_cursor.config import PaginationSettings
    from keyset_cursor.kernel.errors import ValidationError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
