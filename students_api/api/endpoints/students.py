import logging
from typing import List

from fastapi import APIRouter, Depends, Path, status

from students_api.api.deps import get_storage
from students_api.schemas.student import (
    MAX_INT64,
    DeleteStudentResponse,
    Student,
    StudentCreate,
    StudentUpdate,
)
from students_api.storage.base import IStudentStorage

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=Student, status_code=status.HTTP_201_CREATED)
def create_student(
    student: StudentCreate,
    storage: IStudentStorage = Depends(get_storage)
):
    """
    Create a new student

    Required:
    - **name**: non-empty
    - **email**: non-empty
    - **age**: zero or greater
    """
    student_id = storage.create_student(student.name, student.email, student.age)
    logger.info(f"Student created with id {student_id}")
    return Student(id=student_id, **student.model_dump())


@router.get("/{student_id}", response_model=Student)
def get_student(
    student_id: int = Path(..., ge=1, le=MAX_INT64),
    storage: IStudentStorage = Depends(get_storage)
):
    """
    Get one student by ID
    """
    logger.info(f"Getting student {student_id}")
    return storage.get_student_by_id(student_id)


@router.get("", response_model=List[Student])
def get_students(storage: IStudentStorage = Depends(get_storage)):
    """
    List all students
    """
    logger.info("Getting all students")
    return storage.get_students()


@router.delete("/{student_id}", response_model=DeleteStudentResponse)
def delete_student(
    student_id: int = Path(..., ge=1, le=MAX_INT64),
    storage: IStudentStorage = Depends(get_storage)
):
    """
    Delete a student. Deleting an id that does not exist is a 404.
    """
    message = storage.delete_student_by_id(student_id)
    logger.info(f"Student {student_id} deleted")
    return DeleteStudentResponse(id=student_id, status=message)


@router.put("", response_model=Student)
def update_student(
    student: StudentUpdate,
    storage: IStudentStorage = Depends(get_storage)
):
    """
    Replace name, email and age of an existing student

    Required:
    - **id**: id of the student to update
    - **name**: non-empty
    - **email**: well-formed email address
    - **age**: zero or greater
    """
    updated_student = storage.update_student(
        student.id, student.name, str(student.email), student.age
    )
    logger.info(f"Student {student.id} updated")
    return updated_student
