from typing import Optional
from pydantic import BaseModel, ConfigDict


class StudentBase(BaseModel):
    name: str
    age: int
    email: str


class StudentCreate(StudentBase):
    id: int


class StudentUpdate(StudentBase):
    # Overridden by the id in the URL
    id: Optional[int] = None


class Student(StudentBase):
    id: int

    model_config = ConfigDict(from_attributes=True)
