from fastapi import Depends
from sqlalchemy.orm import Session
from app.core.database import get_db
from app.repositories.student import StudentRepository
from app.services.student.student import StudentService


def get_student_service(db: Session = Depends(get_db)) -> StudentService:
    """
    Dependency that builds a StudentService on the request's session.
    The session itself is closed by get_db once the request completes.
    """
    return StudentService(StudentRepository(db))
