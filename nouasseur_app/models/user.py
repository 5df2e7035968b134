# nouasseur_app/models/user.py

from sqlalchemy import func, or_
from werkzeug.security import check_password_hash, generate_password_hash

from .base import BaseModel, db


class User(BaseModel):
    """Login principal; members and directory entries are not linked to it"""

    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(255), unique=True, nullable=False, index=True)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)

    serialize_exclude = ("password_hash", "updated_at")

    def __repr__(self):
        return f"<User {self.username}>"

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        if not self.password_hash or not password:
            return False
        return check_password_hash(self.password_hash, password)

    @staticmethod
    def find_by_login(identifier):
        """Find a user whose username or email equals the identifier"""
        identifier = (identifier or "").strip()
        if not identifier:
            return None
        return User.query.filter(
            or_(User.username == identifier, func.lower(User.email) == identifier.lower())
        ).first()

    @staticmethod
    def find_by_username(username):
        return User.query.filter_by(username=username).first()

    @staticmethod
    def find_by_email(email):
        return User.query.filter(func.lower(User.email) == (email or "").lower()).first()
