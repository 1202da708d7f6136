from typing import Dict, List, Optional
from fastapi import APIRouter, Body, Depends, Response, status
from app.api.deps import get_student_service
from app.schemas.student import Student, StudentCreate, StudentUpdate
from app.services.student.query import DEFAULT_LIMIT, DEFAULT_OFFSET, DEFAULT_SORT
from app.services.student.student import StudentService

router = APIRouter()


@router.get("", response_model=List[Student])
def get_students(
    name: Optional[str] = None,
    age: Optional[str] = None,
    sort: str = DEFAULT_SORT,
    limit: int = DEFAULT_LIMIT,
    offset: int = DEFAULT_OFFSET,
    service: StudentService = Depends(get_student_service)
):
    """
    List students, filtered, sorted and paginated

    - **name**: exact name match
    - **age**: `<op>:<value>` with op one of `$eq`, `$ne`, `$lte`, `$gte`
    - **sort**: `<field>:<direction>`, field one of id/name/age/email, direction asc/desc (default `id:asc`)
    - **limit**: maximum number of records (default: 100)
    - **offset**: records skipped after filtering and sorting (default: 0)
    """
    return service.list_students(
        name_value=name,
        age_expression=age,
        sort_expression=sort,
        limit=limit,
        offset=offset,
    )


@router.get("/{student_id}", response_model=Student)
def get_student(
    student_id: int,
    service: StudentService = Depends(get_student_service)
):
    return service.get_student(student_id)


@router.post("", response_model=Student, status_code=status.HTTP_201_CREATED)
def create_student(
    student: StudentCreate,
    service: StudentService = Depends(get_student_service)
):
    """
    Create a student with a client-chosen id.
    Returns 400 with no body if the id is already taken.
    """
    return service.create_student(student)


@router.put("/{student_id}", response_model=Student)
def update_student(
    student_id: int,
    student: StudentUpdate,
    service: StudentService = Depends(get_student_service)
):
    """
    Replace a student. The id in the URL always wins over one in the body.
    """
    return service.replace_student(student_id, student)


@router.patch("/{student_id}", response_model=Student)
def patch_student(
    student_id: int,
    updates: Dict[str, str] = Body(...),
    service: StudentService = Depends(get_student_service)
):
    """
    Update some of name, age and email. Values are strings; unknown keys are ignored.
    """
    return service.patch_student(student_id, updates)


@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_student(
    student_id: int,
    service: StudentService = Depends(get_student_service)
):
    service.delete_student(student_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def delete_students(
    ids: List[int] = Body(...),
    service: StudentService = Depends(get_student_service)
):
    """
    Delete students in order, stopping at the first id that fails.
    The response is that id's failure status, or 204 if all were deleted.
    """
    service.delete_students(ids)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
