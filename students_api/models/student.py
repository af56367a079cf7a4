from sqlalchemy import Column, Integer, Text
from students_api.core.database import Base


class Student(Base):
    __tablename__ = "students"
    # AUTOINCREMENT: ids of deleted rows are never handed out again
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    name = Column(Text)
    email = Column(Text)
    age = Column(Integer)
