"""
First-boot seed data: the default admin principal and the sample portfolio.
"""

from .database import Database, utc_timestamp
from .logging_service import logger

SAMPLE_PROJECTS = [
    {
        'id': 1,
        'title': 'Skyline Apartments',
        'description': 'Luxury residential complex with modern amenities and stunning city views.',
        'location': 'Chennai, Tamil Nadu',
        'status': 'completed',
        'category': 'Residential',
        'image_url': 'completed.jpg',
        'area': '1200-2500 sq ft',
        'bedrooms': 3,
        'bathrooms': 2,
        'price': 8500000,
        'completion_date': '2023-12-15',
    },
    {
        'id': 2,
        'title': 'Industrial Complex X',
        'description': 'State-of-the-art industrial facility with advanced manufacturing capabilities.',
        'location': 'Coimbatore, Tamil Nadu',
        'status': 'ongoing',
        'category': 'Industrial',
        'image_url': 'ongoing.jpg',
        'area': '50000 sq ft',
        'bedrooms': None,
        'bathrooms': None,
        'price': 125000000,
        'completion_date': '2024-08-30',
    },
    {
        'id': 3,
        'title': 'Blue Horizon Villas',
        'description': 'Premium villa community with private gardens and exclusive amenities.',
        'location': 'Madurai, Tamil Nadu',
        'status': 'upcoming',
        'category': 'Residential',
        'image_url': 'upcoming.jpg',
        'area': '3000-4500 sq ft',
        'bedrooms': 4,
        'bathrooms': 3,
        'price': 15000000,
        'completion_date': '2025-06-15',
    },
    {
        'id': 4,
        'title': 'City Center Plaza',
        'description': 'Modern commercial complex in the heart of the business district.',
        'location': 'Bangalore, Karnataka',
        'status': 'completed',
        'category': 'Commercial',
        'image_url': 'portfolio-1.jpg',
        'area': '25000 sq ft',
        'bedrooms': None,
        'bathrooms': None,
        'price': 75000000,
        'completion_date': '2023-09-20',
    },
    {
        'id': 5,
        'title': 'Emerald Heights',
        'description': 'Eco-friendly residential towers with sustainable design features.',
        'location': 'Kochi, Kerala',
        'status': 'ongoing',
        'category': 'Residential',
        'image_url': 'portfolio-2.jpg',
        'area': '1500-3000 sq ft',
        'bedrooms': 2,
        'bathrooms': 2,
        'price': 12000000,
        'completion_date': '2024-12-10',
    },
    {
        'id': 6,
        'title': 'Modern Office Hub',
        'description': 'Contemporary office spaces with cutting-edge technology infrastructure.',
        'location': 'Pune, Maharashtra',
        'status': 'completed',
        'category': 'Commercial',
        'image_url': 'portfolio-3.jpg',
        'area': '15000 sq ft',
        'bedrooms': None,
        'bathrooms': None,
        'price': 45000000,
        'completion_date': '2023-11-05',
    },
]

_SEED_COLUMNS = ('id', 'title', 'description', 'location', 'status', 'category',
                 'image_url', 'area', 'bedrooms', 'bathrooms', 'price', 'completion_date')


def seed_sample_projects(db_path, projects=None):
    """Insert the sample projects, skipping any id that already exists.

    Returns the number of rows actually inserted.
    """
    projects = SAMPLE_PROJECTS if projects is None else projects
    placeholders = ', '.join('?' for _ in range(len(_SEED_COLUMNS) + 2))
    inserted = 0

    with Database.connect(db_path) as conn:
        cursor = conn.cursor()
        for project in projects:
            # One clock read per row so creation order follows id order
            now = utc_timestamp()
            cursor.execute(f'''
                INSERT OR IGNORE INTO projects
                ({', '.join(_SEED_COLUMNS)}, created_at, updated_at)
                VALUES ({placeholders})
            ''', tuple(project.get(col) for col in _SEED_COLUMNS) + (now, now))
            inserted += cursor.rowcount

    if inserted:
        logger.info('seed', f"Inserted {inserted} sample projects")
    return inserted
