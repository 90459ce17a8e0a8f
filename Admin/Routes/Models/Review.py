from datetime import datetime
from .User import db

class Review(db.Model):
    __tablename__ = 'reviews'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, nullable=True)
    user_name = db.Column(db.String(255), nullable=True)
    # place_name is a denormalized copy, no foreign key
    place_id = db.Column(db.Integer, nullable=True)
    place_name = db.Column(db.String(255), nullable=True)
    content = db.Column(db.Text, nullable=False)
    rating = db.Column(db.String(10), nullable=True)
    status = db.Column(db.String(50), nullable=False, default='pending')
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    def __repr__(self):
        return f'<Review id={self.id} status={self.status}>'
