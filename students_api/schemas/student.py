from pydantic import BaseModel, ConfigDict, EmailStr, Field, StrictInt

# Largest value an SQLite INTEGER column holds
MAX_INT64 = 2**63 - 1


class StudentBase(BaseModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    # Strict: JSON true or "21" is rejected rather than coerced
    age: StrictInt = Field(..., ge=0, le=MAX_INT64)


class StudentCreate(StudentBase):
    pass


class StudentUpdate(StudentBase):
    """Full replacement of a student's mutable fields; email must be well-formed."""
    id: StrictInt = Field(..., ge=1, le=MAX_INT64)
    email: EmailStr


class Student(BaseModel):
    id: int
    name: str
    email: str
    age: int

    model_config = ConfigDict(from_attributes=True)


class DeleteStudentResponse(BaseModel):
    id: int
    status: str
