# File: app/db/user_store.py

"""
Credential store: persisted users keyed by email.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import ConflictError
from app.models.user import User


class CredentialStore:
    def __init__(self, db: Session):
        self.db = db

    def find_by_email(self, email: str) -> Optional[User]:
        return self.db.scalars(select(User).where(User.email == email)).first()

    def find_by_id(self, user_id: str) -> Optional[User]:
        return self.db.get(User, user_id)

    def insert(self, user: User) -> User:
        """
        Persist ``user`` and return it with its id assigned.

        A duplicate email trips the unique index; that is rolled back and
        reported as ConflictError so concurrent signups cannot both win.
        """
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            raise ConflictError("User already exists") from exc
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(user)
        return user
