import logging
from typing import Dict, List, Optional

from app.core.exceptions import BadRequestException, DeleteNotAppliedException, NotFoundException
from app.models.student import Student
from app.repositories.student import StudentRepository
from app.schemas.student import StudentCreate, StudentUpdate
from app.services.student.query import (
    DEFAULT_LIMIT,
    DEFAULT_OFFSET,
    DEFAULT_SORT,
    filter_by_age,
    filter_by_name,
    paginate,
    parse_int,
    sort_students,
)

logger = logging.getLogger(__name__)

SEED_COUNT = 999
SEED_AGE = 57


class StudentService:
    """
    Student operations on top of a StudentRepository.

    Failures are raised as BaseAPIException subclasses carrying the HTTP
    status; a successful call returns the resulting Student (or None).
    """

    def __init__(self, repository: StudentRepository):
        self.repository = repository

    def list_students(
        self,
        name_value: Optional[str] = None,
        age_expression: Optional[str] = None,
        sort_expression: Optional[str] = DEFAULT_SORT,
        limit: int = DEFAULT_LIMIT,
        offset: int = DEFAULT_OFFSET,
    ) -> List[Student]:
        """Filter by name then age, sort, then apply offset/limit."""
        students = self.repository.find_all()
        students = filter_by_name(students, name_value)
        students = filter_by_age(students, age_expression)
        students = sort_students(students, sort_expression)
        page = paginate(students, limit=limit, offset=offset)
        logger.debug(
            f"Listed {len(page)} of {len(students)} students "
            f"(name={name_value!r}, age={age_expression!r}, sort={sort_expression!r}, "
            f"limit={limit}, offset={offset})"
        )
        return page

    def get_student(self, student_id: int) -> Student:
        student = self.repository.find_by_id(student_id)
        if student is None:
            raise NotFoundException(f"Student {student_id} not found")
        return student

    def create_student(self, payload: StudentCreate) -> Student:
        if self.repository.exists_by_id(payload.id):
            raise BadRequestException(f"Student {payload.id} already exists")
        student = self.repository.save(Student(**payload.model_dump()))
        logger.info(f"Created student {student.id}")
        return student

    def replace_student(self, student_id: int, payload: StudentUpdate) -> Student:
        if not self.repository.exists_by_id(student_id):
            raise NotFoundException(f"Student {student_id} not found")
        data = payload.model_dump()
        data["id"] = student_id
        student = self.repository.save(Student(**data))
        logger.info(f"Replaced student {student_id}")
        return student

    def patch_student(self, student_id: int, updates: Dict[str, str]) -> Student:
        """
        Overwrite name, age and/or email from string values.

        Other keys are ignored. An age that is not an integer string raises
        ValueError.
        """
        if not self.repository.exists_by_id(student_id):
            raise NotFoundException(f"Student {student_id} not found")

        student = self.repository.get_by_id(student_id)
        for code, value in updates.items():
            if code == "name":
                student.name = value
            elif code == "age":
                student.age = parse_int(value)
            elif code == "email":
                student.email = value

        student = self.repository.save(student)
        logger.info(f"Patched student {student_id} fields={sorted(updates)}")
        return student

    def delete_student(self, student_id: int) -> None:
        if not self.repository.exists_by_id(student_id):
            raise NotFoundException(f"Student {student_id} not found")

        self.repository.delete_by_id(student_id)
        if self.repository.exists_by_id(student_id):
            raise DeleteNotAppliedException(f"Student {student_id} still exists after delete")
        logger.info(f"Deleted student {student_id}")

    def delete_students(self, student_ids: List[int]) -> None:
        """Delete in order; the first failure stops the batch and is re-raised."""
        for student_id in student_ids:
            self.delete_student(student_id)

    def seed_students(self) -> None:
        students = [
            Student(
                id=i,
                name=f"Kamal_{i}",
                email=f"kamal{i}@gmail.com",
                age=SEED_AGE,
            )
            for i in range(1, SEED_COUNT + 1)
        ]
        self.repository.save_all(students)
        logger.info(f"Seeded {len(students)} students")
