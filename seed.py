import logging
from app.core.database import SessionLocal, create_database_tables
from app.repositories.student import StudentRepository
from app.services.student.student import StudentService

# Setup logging to see output
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def seed_data():
    """
    Seed the database with the demo students served by GET /init.
    Existing students 1..999 are overwritten.
    """
    create_database_tables()
    db = SessionLocal()
    try:
        logger.info("Seeding data...")
        StudentService(StudentRepository(db)).seed_students()
        logger.info("Data seeded successfully")
    except Exception as e:
        logger.error(f"Error seeding data: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_data()
