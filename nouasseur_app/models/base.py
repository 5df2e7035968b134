# nouasseur_app/models/base.py

from datetime import date, datetime, timezone

from flask import current_app
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy.exc import SQLAlchemyError

db = SQLAlchemy()


def utcnow():
    return datetime.now(timezone.utc)


def _serialize_value(value):
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value


class BaseModel(db.Model):
    """Abstract base carrying timestamps and commit helpers shared by every table"""

    __abstract__ = True

    created_at = db.Column(db.DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    # Columns never included in to_dict()
    serialize_exclude = ()

    def to_dict(self):
        """Serialize mapped columns to a JSON-ready dict"""
        return {
            column.name: _serialize_value(getattr(self, column.name))
            for column in self.__table__.columns
            if column.name not in self.serialize_exclude
        }

    @classmethod
    def find_by_id(cls, record_id):
        """Find record by primary key; store errors propagate to the caller"""
        return db.session.get(cls, record_id)

    @classmethod
    def safe_create(cls, **kwargs):
        """Create and commit a record, returning (record, error)"""
        try:
            record = cls(**kwargs)
            db.session.add(record)
            db.session.commit()
            return record, None
        except SQLAlchemyError as e:
            db.session.rollback()
            current_app.logger.error(f"Database error creating {cls.__name__}: {str(e)}")
            return None, str(e)

    def safe_update(self, **kwargs):
        """Merge the given fields, stamp updated_at and commit, returning (success, error)"""
        try:
            for key, value in kwargs.items():
                setattr(self, key, value)
            # Stamped explicitly so that an empty merge still records the write
            self.updated_at = utcnow()
            db.session.commit()
            return True, None
        except SQLAlchemyError as e:
            db.session.rollback()
            current_app.logger.error(
                f"Database error updating {type(self).__name__} {getattr(self, 'id', None)}: {str(e)}"
            )
            return False, str(e)

    def safe_delete(self):
        """Delete and commit, returning (success, error)"""
        try:
            db.session.delete(self)
            db.session.commit()
            return True, None
        except SQLAlchemyError as e:
            db.session.rollback()
            current_app.logger.error(
                f"Database error deleting {type(self).__name__} {getattr(self, 'id', None)}: {str(e)}"
            )
            return False, str(e)
