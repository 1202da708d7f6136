from fastapi import APIRouter, Depends, Response, status
from app.api.deps import get_student_service
from app.services.student.student import StudentService

router = APIRouter()


@router.get("", summary="Seed demo students")
def init(service: StudentService = Depends(get_student_service)):
    """
    Upsert students 1..999 named Kamal_<i>, aged 57, with email kamal<i>@gmail.com.
    """
    service.seed_students()
    return Response(status_code=status.HTTP_200_OK)
