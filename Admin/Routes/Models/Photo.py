from datetime import datetime
from .User import db

class Photo(db.Model):
    __tablename__ = 'photos'

    id = db.Column(db.Integer, primary_key=True)
    uploader_id = db.Column(db.Integer, nullable=True)
    uploader_name = db.Column(db.String(255), nullable=True)
    url = db.Column(db.Text, nullable=False)
    caption = db.Column(db.Text, nullable=True)
    related_type = db.Column(db.String(50), nullable=True)
    related_id = db.Column(db.Integer, nullable=True)
    status = db.Column(db.String(50), nullable=False, default='pending')
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    def __repr__(self):
        return f'<Photo id={self.id} status={self.status}>'
