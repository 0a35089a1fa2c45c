from datetime import datetime
import uuid

from flask import current_app
from sqlalchemy.exc import IntegrityError

from roster import db
from roster.models.user import User
from roster.utils.tokens import issue_token
from roster.utils.validators import validate_credential


class AuthService:

    @staticmethod
    def find_user(kind, credential):
        return User.query.filter_by(**{kind: credential}).first()

    @staticmethod
    def get_or_create_user(raw_credential):
        """
        Resolve a username or email to a user, creating the user on first login.

        Returns:
            tuple: (user, created)
        """
        kind, credential = validate_credential(raw_credential)
        now = datetime.utcnow()

        user = AuthService.find_user(kind, credential)
        if user:
            user.last_login = now
            db.session.commit()
            return user, False

        user = User(user_id=str(uuid.uuid4()), created_at=now, last_login=now)
        setattr(user, kind, credential)
        try:
            db.session.add(user)
            db.session.commit()
        except IntegrityError:
            # a concurrent first login created the same credential
            db.session.rollback()
            user = AuthService.find_user(kind, credential)
            if not user:
                raise
            user.last_login = now
            db.session.commit()
            return user, False

        current_app.logger.info(f'Created user {user.user_id} on first login')
        return user, True

    @staticmethod
    def login(raw_credential):
        """Return ``(user, token)`` for a submitted credential"""
        user, _ = AuthService.get_or_create_user(raw_credential)
        return user, issue_token(user)
