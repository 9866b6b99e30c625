"""SQLAlchemy ORM model for the employee roster."""
from sqlalchemy import Column, Integer, String, Text
from .config import settings
from .database import Base


class Employee(Base):
    __tablename__ = settings.employee_table

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    availability = Column(Text, nullable=False, default="None")

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "availability": self.availability}
