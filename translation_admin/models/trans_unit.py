"""Trans unit model: one translatable string keyed by domain and key."""

from datetime import datetime
from translation_admin import db


class TransUnit(db.Model):
    """A translatable string grouped by domain."""
    
    __tablename__ = 'trans_units'
    
    id = db.Column(db.Integer, primary_key=True)
    key = db.Column(db.String(255), nullable=False, index=True)
    domain = db.Column(db.String(255), default='messages', nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
    
    __table_args__ = (
        db.UniqueConstraint('key', 'domain', name='unique_key_domain'),
    )
    
    # Deleting a unit removes its translations
    translations = db.relationship(
        'Translation',
        backref='trans_unit',
        lazy='selectin',
        cascade='all, delete-orphan',
        order_by='Translation.locale'
    )
    
    def __repr__(self):
        return f'<TransUnit {self.id}: {self.domain}/{self.key}>'
