"""
user_service.py — User accounts
Registration from OAuth callback data, profile updates and deactivation.
"""

import logging

from sqlalchemy.orm import Session

from trackstar.database import utcnow
from trackstar.errors import NotFound, ValidationError
from trackstar.models.user import User

logger = logging.getLogger(__name__)


class UserService:
    @staticmethod
    def register(db: Session, data: dict) -> tuple[User, bool]:
        """
        Create a user for an OAuth identity, or return the existing one.
        Returns (user, created).
        """
        user = db.query(User).filter_by(provider=data["provider"], provider_id=data["provider_id"]).first()
        if user:
            user.last_login = utcnow()
            user.is_active = True
            db.commit()
            db.refresh(user)
            return user, False

        if db.query(User).filter_by(email=data["email"]).first():
            raise ValidationError("Email already registered with another account")

        user = User(
            provider_id=data["provider_id"],
            provider=data["provider"],
            name=data["name"],
            email=data["email"],
            username=data.get("username"),
            avatar=data.get("avatar"),
            last_login=utcnow(),
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        logger.info("Registered user %s via %s", user.id, user.provider)
        return user, True

    @staticmethod
    def get_by_id(db: Session, user_id: str) -> User:
        user = db.query(User).filter_by(id=user_id).first()
        if not user:
            raise NotFound("User not found")
        return user

    @staticmethod
    def get_active(db: Session, user_id: str) -> User:
        user = UserService.get_by_id(db, user_id)
        if not user.is_active:
            raise NotFound("User not found")
        return user

    @staticmethod
    def update(db: Session, user_id: str, data: dict) -> User:
        if not data:
            raise ValidationError("No valid updates provided")
        user = UserService.get_by_id(db, user_id)
        for k, v in data.items():
            setattr(user, k, v)
        db.commit()
        db.refresh(user)
        return user

    @staticmethod
    def deactivate(db: Session, user_id: str) -> None:
        user = UserService.get_by_id(db, user_id)
        user.is_active = False
        db.commit()
        logger.info("Deactivated user %s", user_id)
