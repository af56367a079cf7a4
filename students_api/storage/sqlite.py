"""
SQLite implementation of the student store.

Every operation runs a single statement in its own session. The engine is
shared by all request workers; SQLite's own locking serializes writes.
"""
import logging
from typing import List

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from students_api.core.database import (
    build_engine,
    build_session_factory,
    check_database_connection,
    create_database_tables,
)
from students_api.core.exceptions import (
    InitializationError,
    NotFoundError,
    QueryError,
    WriteError,
)
from students_api.models.student import Student as StudentModel
from students_api.schemas.student import Student
from students_api.storage.base import IStudentStorage

logger = logging.getLogger(__name__)


class SqliteStorage(IStudentStorage):
    """Student store backed by a single SQLite file."""

    def __init__(self, storage_path: str, echo: bool = False):
        self.storage_path = storage_path
        try:
            self._engine = build_engine(storage_path, echo=echo)
            check_database_connection(self._engine)
            create_database_tables(self._engine)
        except (SQLAlchemyError, OSError) as e:
            raise InitializationError(
                f"failed to initialize storage at {storage_path}: {e}"
            ) from e

        self._session_factory = build_session_factory(self._engine)
        logger.debug(f"SQLite storage opened at {storage_path}")

    def create_student(self, name: str, email: str, age: int) -> int:
        db = self._session_factory()
        try:
            db_student = StudentModel(name=name, email=email, age=age)
            db.add(db_student)
            db.commit()
            return db_student.id
        except (SQLAlchemyError, OverflowError) as e:
            db.rollback()
            raise WriteError(f"failed to insert student: {e}") from e
        finally:
            db.close()

    def get_student_by_id(self, student_id: int) -> Student:
        db = self._session_factory()
        try:
            db_student = db.query(StudentModel).filter(StudentModel.id == student_id).first()
            if db_student is None:
                raise NotFoundError(student_id)
            return Student.model_validate(db_student)
        except (SQLAlchemyError, OverflowError, ValidationError) as e:
            raise QueryError(f"query error: {e}") from e
        finally:
            db.close()

    def get_students(self) -> List[Student]:
        """
        Return all rows in the order SQLite yields them.

        One unreadable row fails the whole call; no partial list is returned.
        """
        db = self._session_factory()
        try:
            return [Student.model_validate(row) for row in db.query(StudentModel).all()]
        except (SQLAlchemyError, ValidationError) as e:
            raise QueryError(f"failed to list students: {e}") from e
        finally:
            db.close()

    def delete_student_by_id(self, student_id: int) -> str:
        db = self._session_factory()
        try:
            deleted = (
                db.query(StudentModel)
                .filter(StudentModel.id == student_id)
                .delete(synchronize_session=False)
            )
            if deleted == 0:
                db.rollback()
                raise NotFoundError(student_id)
            db.commit()
        except (SQLAlchemyError, OverflowError) as e:
            db.rollback()
            raise WriteError(f"failed to delete student {student_id}: {e}") from e
        finally:
            db.close()

        return "delete successfully"

    def update_student(self, student_id: int, name: str, email: str, age: int) -> Student:
        """
        Overwrite the mutable fields of one row.

        The returned Student is built from the arguments, the row is not read back.
        """
        db = self._session_factory()
        try:
            updated = (
                db.query(StudentModel)
                .filter(StudentModel.id == student_id)
                .update(
                    {
                        StudentModel.name: name,
                        StudentModel.email: email,
                        StudentModel.age: age,
                    },
                    synchronize_session=False,
                )
            )
            if updated == 0:
                db.rollback()
                raise NotFoundError(student_id)
            db.commit()
        except (SQLAlchemyError, OverflowError) as e:
            db.rollback()
            raise WriteError(f"failed to update student {student_id}: {e}") from e
        finally:
            db.close()

        return Student(id=student_id, name=name, email=email, age=age)

    def close(self):
        self._engine.dispose()
        logger.debug(f"SQLite storage at {self.storage_path} closed")
