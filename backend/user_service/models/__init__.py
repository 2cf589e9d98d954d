"""ORM Models — SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)
    - ORM rows never leave infrastructure/: the repository maps them to core.user.User
"""

from user_service.models.user import UserModel  # noqa: F401
