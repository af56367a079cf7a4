"""
Storage interface for student records.
"""
from abc import ABC, abstractmethod
from typing import List

from students_api.schemas.student import Student


class IStudentStorage(ABC):
    """Operations the HTTP layer needs from a student store."""

    @abstractmethod
    def create_student(self, name: str, email: str, age: int) -> int:
        """Insert a student and return the id assigned by the store."""
        pass

    @abstractmethod
    def get_student_by_id(self, student_id: int) -> Student:
        """Fetch one student; raises NotFoundError when absent."""
        pass

    @abstractmethod
    def get_students(self) -> List[Student]:
        """Fetch every student in store order."""
        pass

    @abstractmethod
    def delete_student_by_id(self, student_id: int) -> str:
        """Delete one student and return a status message; raises NotFoundError when absent."""
        pass

    @abstractmethod
    def update_student(self, student_id: int, name: str, email: str, age: int) -> Student:
        """Overwrite name, email and age; raises NotFoundError when absent."""
        pass

    def close(self):
        """Release the underlying connection resources."""
        pass
