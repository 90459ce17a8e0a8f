import json

from ..Utils.Logger import get_logger

logger = get_logger(__name__)


def seed_database(storage):
    """
    Insert the demo dataset when the users table is empty.

    Inserts run one by one without a surrounding transaction, so a failure
    part-way leaves whatever was already written. Errors are logged and never
    re-raised; the service keeps running without demo data.

    Returns:
        bool: True if the demo data was written, False otherwise.
    """
    try:
        if storage.get_users():
            logger.info("Users present, skipping demo seed")
            return False

        logger.info("Seeding database...")

        user1 = storage.create_user({'name': 'Sarah Miller', 'email': 'sarah@example.com', 'role': 'user', 'status': 'active'})
        user2 = storage.create_user({'name': 'John Doe', 'email': 'john@example.com', 'role': 'user', 'status': 'active'})
        user3 = storage.create_user({'name': 'TravelSL', 'email': 'travel@example.com', 'role': 'admin', 'status': 'active'})
        storage.create_user({'name': 'Mike Smith', 'email': 'mike@example.com', 'role': 'user', 'status': 'disabled'})

        place1 = storage.create_place({
            'name': 'Secret Beach Cove',
            'description': 'A hidden gem with pristine white sand and turquoise waters.',
            'location': 'Mirissa, South Coast',
            'category': 'Beach',
            'image_url': 'https://images.unsplash.com/photo-1507525428034-b723cf961d3e',
            'rating': '4.8',
            'status': 'active',
            'amenities': json.dumps(['Parking', 'WiFi', 'Restrooms']),
            'coordinates': json.dumps({'lat': 5.9485, 'lng': 80.5353}),
        })
        place2 = storage.create_place({
            'name': 'Hidden Waterfall Trail',
            'description': 'A scenic hike leading to a breathtaking waterfall.',
            'location': 'Ella, Hill Country',
            'category': 'Nature',
            'image_url': 'https://images.unsplash.com/photo-1432405972618-c60b0225b8f9',
            'rating': '4.9',
            'status': 'active',
            'amenities': json.dumps(['Guide Available', 'Hiking']),
            'coordinates': json.dumps({'lat': 6.8667, 'lng': 81.0466}),
        })
        storage.create_place({
            'name': 'Ancient Temple Ruins',
            'description': 'Historical ruins dating back to the 5th century.',
            'location': 'Anuradhapura',
            'category': 'Cultural',
            'image_url': 'https://images.unsplash.com/photo-1588596623667-27e163b96c9c',
            'rating': '4.7',
            'status': 'active',
            'amenities': json.dumps(['Guide Available']),
            'coordinates': json.dumps({'lat': 8.3114, 'lng': 80.4037}),
        })

        storage.create_playlist({
            'name': 'Southern Coast Adventure',
            'description': 'Explore the best beaches and coastal towns.',
            'creator_id': user3.id,
            'creator_name': user3.name,
            'status': 'approved',
            'places_count': 8,
            'is_featured': True,
            'visibility': 'public',
        })
        storage.create_playlist({
            'name': 'Hill Country Hikes',
            'description': 'Best hiking trails in Ella and Nuwara Eliya.',
            'creator_id': user2.id,
            'creator_name': user2.name,
            'status': 'pending',
            'places_count': 6,
            'is_featured': False,
            'visibility': 'public',
        })

        storage.create_trip({'user_id': user1.id, 'destination': 'Sri Lanka', 'status': 'completed'})
        storage.create_trip({'user_id': user2.id, 'destination': 'Maldives', 'status': 'planned'})
        storage.create_trip({'user_id': user1.id, 'destination': 'Japan', 'status': 'completed'})

        storage.create_review({
            'user_id': user1.id,
            'user_name': user1.name,
            'place_id': place1.id,
            'place_name': place1.name,
            'content': 'Absolutely stunning place! Must visit.',
            'rating': '5',
            'status': 'pending',
        })
        storage.create_review({
            'user_id': user2.id,
            'user_name': user2.name,
            'place_id': place2.id,
            'place_name': place2.name,
            'content': 'A bit hard to find, but worth the hike.',
            'rating': '4',
            'status': 'approved',
        })

        storage.create_photo({
            'uploader_id': user1.id,
            'uploader_name': user1.name,
            'url': 'https://images.unsplash.com/photo-1506929562872-bb421503ef21',
            'caption': 'Sunset at the beach',
            'related_type': 'place',
            'related_id': place1.id,
            'status': 'pending',
        })

        logger.info("Database seeded successfully!")
        return True
    except Exception as e:
        logger.warning(f"Database seeding failed (DB may be offline): {e}")
        return False
