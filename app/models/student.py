from sqlalchemy import Column, Integer, String
from app.core.database import Base


class Student(Base):
    __tablename__ = "students"

    # Ids are chosen by the client, never generated
    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String, nullable=False)
    age = Column(Integer, nullable=False)
    email = Column(String, nullable=False)

    def __repr__(self) -> str:
        return f"<Student id={self.id} name={self.name!r}>"
