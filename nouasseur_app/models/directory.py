# nouasseur_app/models/directory.py

from sqlalchemy import Index

from .base import BaseModel, db


class DirectoryEntry(BaseModel):
    """Business/organization style listing in the community directory"""

    __tablename__ = "directories"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    position = db.Column(db.String(255), nullable=True)
    organization = db.Column(db.String(255), nullable=True)
    department = db.Column(db.String(255), nullable=True)

    # Postal address
    address = db.Column(db.String(255), nullable=True)
    city = db.Column(db.String(100), nullable=True)
    state = db.Column(db.String(50), nullable=True)
    zip_code = db.Column(db.String(20), nullable=True)
    country = db.Column(db.String(100), nullable=True)

    # Contact information
    phone = db.Column(db.String(50), nullable=True)
    email = db.Column(db.String(255), nullable=True)
    website = db.Column(db.String(255), nullable=True)

    # Classification
    category = db.Column(db.String(100), nullable=True, index=True)
    sub_category = db.Column(db.String(100), nullable=True)
    description = db.Column(db.Text, nullable=True)
    notes = db.Column(db.Text, nullable=True)
    sort_order = db.Column(db.Integer, nullable=True)
    is_active = db.Column(db.Boolean, default=True, nullable=False)

    __table_args__ = (Index("idx_directory_sort", "sort_order", "name"),)

    def __repr__(self):
        return f"<DirectoryEntry {self.name}>"

    def get_full_address(self):
        """Get formatted full address"""
        parts = [self.address] if self.address else []
        locality = " ".join(part for part in (self.state, self.zip_code) if part)
        if self.city and locality:
            parts.append(f"{self.city}, {locality}")
        elif self.city or locality:
            parts.append(self.city or locality)
        if self.country:
            parts.append(self.country)
        return ", ".join(parts)
