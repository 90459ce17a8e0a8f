"""
Data access layer for the admin backend.

DatabaseStorage wraps the Flask-SQLAlchemy handle and exposes one method per
entity operation. It is built once in create_app() and registered on the app
as ``app.extensions['storage']``; views fetch it with ``get_storage()``.
"""

import random
from typing import Optional

from flask import current_app

from ..Routes.Models.User import User
from ..Routes.Models.Place import Place
from ..Routes.Models.Playlist import Playlist
from ..Routes.Models.Trip import Trip
from ..Routes.Models.Review import Review
from ..Routes.Models.Photo import Photo
from ..Utils.Logger import get_logger

logger = get_logger(__name__)

# Placeholder series for the dashboard chart, not derived from stored data.
ACTIVITY_PERIODS = ['2024-01', '2024-02', '2024-03', '2024-04', '2024-05', '2024-06']
ACTIVITY_TRIPS_RANGE = (10, 59)
ACTIVITY_PLAYLISTS_RANGE = (5, 24)

# Largest id a 64-bit signed INTEGER column can hold; anything past it cannot
# match a row and would overflow the driver.
MAX_ROW_ID = 2 ** 63 - 1


class DatabaseStorage:
    """Repository for every table the admin backend touches."""

    def __init__(self, db):
        self.db = db

    # ── helpers ────────────────────────────────────────────

    def _commit(self, action: str) -> None:
        try:
            self.db.session.commit()
        except Exception as e:
            self.db.session.rollback()
            logger.error(f"Failed to {action}: {e}")
            raise

    def _list(self, model, *order_by) -> list:
        query = self.db.select(model)
        if order_by:
            query = query.order_by(*order_by)
        return list(self.db.session.execute(query).scalars())

    def _get(self, model, row_id: int):
        if abs(row_id) > MAX_ROW_ID:
            return None
        return self.db.session.get(model, row_id)

    def _create(self, model, data: dict):
        row = model(**data)
        self.db.session.add(row)
        self._commit(f"create {model.__tablename__} row")
        logger.debug(f"Created {model.__tablename__} id={row.id}")
        return row

    def _update(self, model, row_id: int, changes: dict):
        row = self._get(model, row_id)
        if row is None:
            return None
        for key, value in changes.items():
            setattr(row, key, value)
        self._commit(f"update {model.__tablename__} id={row_id}")
        return row

    def _delete(self, model, row_id: int) -> None:
        if abs(row_id) > MAX_ROW_ID:
            return
        # bulk delete: matching nothing is not an error
        self.db.session.execute(self.db.delete(model).where(model.id == row_id))
        self._commit(f"delete {model.__tablename__} id={row_id}")
        logger.info(f"Deleted {model.__tablename__} id={row_id}")

    # ── users ──────────────────────────────────────────────

    def get_users(self) -> list:
        return self._list(User, User.joined_at.desc(), User.id.desc())

    def get_user(self, user_id: int) -> Optional[User]:
        return self._get(User, user_id)

    def create_user(self, data: dict) -> User:
        return self._create(User, data)

    def update_user_status(self, user_id: int, status: str) -> Optional[User]:
        return self._update(User, user_id, {'status': status})

    def delete_user(self, user_id: int) -> None:
        self._delete(User, user_id)

    # ── places ─────────────────────────────────────────────

    def get_places(self) -> list:
        return self._list(Place, Place.created_at.desc(), Place.id.desc())

    def get_place(self, place_id: int) -> Optional[Place]:
        return self._get(Place, place_id)

    def create_place(self, data: dict) -> Place:
        return self._create(Place, data)

    def update_place(self, place_id: int, data: dict) -> Optional[Place]:
        return self._update(Place, place_id, data)

    def delete_place(self, place_id: int) -> None:
        self._delete(Place, place_id)

    # ── playlists ──────────────────────────────────────────

    def get_playlists(self) -> list:
        return self._list(Playlist, Playlist.created_at.desc(), Playlist.id.desc())

    def create_playlist(self, data: dict) -> Playlist:
        return self._create(Playlist, data)

    def update_playlist_status(self, playlist_id: int, status: str) -> Optional[Playlist]:
        return self._update(Playlist, playlist_id, {'status': status})

    # ── trips ──────────────────────────────────────────────

    def get_trips(self) -> list:
        return self._list(Trip)

    def create_trip(self, data: dict) -> Trip:
        return self._create(Trip, data)

    # ── reviews ────────────────────────────────────────────

    def get_reviews(self) -> list:
        return self._list(Review, Review.created_at.desc(), Review.id.desc())

    def create_review(self, data: dict) -> Review:
        return self._create(Review, data)

    def update_review_status(self, review_id: int, status: str) -> Optional[Review]:
        return self._update(Review, review_id, {'status': status})

    # ── photos ─────────────────────────────────────────────

    def get_photos(self) -> list:
        return self._list(Photo, Photo.created_at.desc(), Photo.id.desc())

    def create_photo(self, data: dict) -> Photo:
        return self._create(Photo, data)

    def update_photo_status(self, photo_id: int, status: str) -> Optional[Photo]:
        return self._update(Photo, photo_id, {'status': status})

    # ── dashboard ──────────────────────────────────────────

    def get_dashboard_stats(self) -> dict:
        """
        Counts are taken from full table scans rather than COUNT queries.
        Fine for demo-sized data; cost grows linearly with each table.
        """
        trips = self.get_trips()
        playlists = self.get_playlists()
        places = self.get_places()
        users = self.get_users()
        reviews = self.get_reviews()

        return {
            'totalTrips': len(trips),
            'totalPlaylists': len(playlists),
            'totalPlaces': len(places),
            'activeUsers': len([u for u in users if u.status == 'active']),
            'pendingReviews': len([r for r in reviews if r.status == 'pending']),
        }

    def get_activity_stats(self) -> list:
        """Mock activity chart: fixed period labels, random unseeded counts."""
        return [
            {
                'date': period,
                'trips': random.randint(*ACTIVITY_TRIPS_RANGE),
                'playlists': random.randint(*ACTIVITY_PLAYLISTS_RANGE),
            }
            for period in ACTIVITY_PERIODS
        ]


def get_storage() -> DatabaseStorage:
    """Return the storage instance registered on the running app."""
    return current_app.extensions['storage']
