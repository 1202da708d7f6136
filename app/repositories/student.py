from typing import List, Optional
from sqlalchemy.orm import Session
from app.models.student import Student


class StudentRepository:
    """
    Persistence access for Student records, bound to one session.

    `save` is an upsert keyed by id. Every write commits immediately.
    """

    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> List[Student]:
        return self.db.query(Student).all()

    def find_by_id(self, student_id: int) -> Optional[Student]:
        return self.db.query(Student).filter(Student.id == student_id).first()

    def get_by_id(self, student_id: int) -> Student:
        """Fetch a student known to exist; raises NoResultFound otherwise."""
        return self.db.query(Student).filter(Student.id == student_id).one()

    def exists_by_id(self, student_id: int) -> bool:
        return self.db.query(
            self.db.query(Student).filter(Student.id == student_id).exists()
        ).scalar()

    def save(self, student: Student) -> Student:
        db_student = self.db.merge(student)
        self.db.commit()
        self.db.refresh(db_student)
        return db_student

    def save_all(self, students: List[Student]) -> None:
        for student in students:
            self.db.merge(student)
        self.db.commit()

    def delete_by_id(self, student_id: int) -> None:
        self.db.query(Student).filter(Student.id == student_id).delete(synchronize_session="fetch")
        self.db.commit()
