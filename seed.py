import logging

from students_api.core.config import load_settings
from students_api.storage.factory import create_storage

# Setup logging to see output
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SAMPLE_STUDENTS = [
    {"name": "Ava Nguyen", "email": "ava@school.edu", "age": 21},
    {"name": "Liam Tran", "email": "liam@school.edu", "age": 22},
    {"name": "Mia Le", "email": "mia@school.edu", "age": 20},
]


def seed_data():
    """
    Function to seed initial data into the database.
    """
    storage = create_storage(load_settings())
    try:
        # Skip when the table already has rows
        if storage.get_students():
            logger.info("Database already contains data. Skipping seed.")
            return

        logger.info("Seeding data...")
        for student in SAMPLE_STUDENTS:
            student_id = storage.create_student(**student)
            logger.info(f"Created student {student_id}: {student['name']}")

        logger.info("Data seeded successfully!")
    finally:
        storage.close() # Always close the connection


if __name__ == "__main__":
    seed_data()
