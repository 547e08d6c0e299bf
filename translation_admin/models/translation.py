"""Translation model: the content of a trans unit for one locale."""

from datetime import datetime
from translation_admin import db


class Translation(db.Model):
    """Localized content of a trans unit."""
    
    __tablename__ = 'translations'
    
    id = db.Column(db.Integer, primary_key=True)
    trans_unit_id = db.Column(db.Integer, db.ForeignKey('trans_units.id', ondelete='CASCADE'), nullable=False, index=True)
    locale = db.Column(db.String(10), nullable=False, index=True)
    content = db.Column(db.Text, nullable=True)
    modified_manually = db.Column(db.Boolean, default=False, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
    
    # At most one translation per unit and locale
    __table_args__ = (
        db.UniqueConstraint('trans_unit_id', 'locale', name='unique_unit_locale'),
    )
    
    def __repr__(self):
        return f'<Translation {self.trans_unit_id}:{self.locale}>'
