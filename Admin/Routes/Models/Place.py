from datetime import datetime
from .User import db

class Place(db.Model):
    __tablename__ = 'places'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False)
    location = db.Column(db.String(255), nullable=False)
    category = db.Column(db.String(100), nullable=False)
    image_url = db.Column(db.Text, nullable=True)
    rating = db.Column(db.String(10), nullable=True)
    status = db.Column(db.String(50), nullable=False, default='active')
    amenities = db.Column(db.Text, nullable=True)  # JSON-encoded list
    coordinates = db.Column(db.Text, nullable=True)  # JSON-encoded {"lat", "lng"}
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    def __repr__(self):
        return f'<Place id={self.id} name={self.name!r}>'
