# elearning/models/entities.py
from sqlalchemy import Column, Integer, String, Date, DateTime
from .db import Base
from .codecs import DelimitedList

class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True)
    username = Column(String, unique=True, index=True)
    # passlib hash; column name kept for existing databases
    password_hash = Column("password", String)
    role = Column(String, default="student")
    email = Column(String)

class Course(Base):
    __tablename__ = "courses"
    __table_args__ = {"sqlite_autoincrement": True}
    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String)
    description = Column(String)
    instructor = Column(String)
    duration = Column(String)
    credits = Column(Integer)
    category = Column(String)

class Enrollment(Base):
    __tablename__ = "enrollments"
    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, index=True)
    course_id = Column(Integer, index=True)
    progress = Column(Integer, nullable=False, default=0, server_default="0")
    enrollment_date = Column(Date)

class Quiz(Base):
    __tablename__ = "quizzes"
    id = Column(Integer, primary_key=True)
    course_id = Column(Integer, index=True)
    question = Column(String)
    options = Column(DelimitedList)
    answer = Column(Integer)

class AttendanceRecord(Base):
    __tablename__ = "attendance"
    __table_args__ = {"sqlite_autoincrement": True}
    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, index=True)
    course_id = Column(Integer)
    date = Column(Date)
    status = Column(String)
    marked_at = Column(DateTime)

class TimetableEntry(Base):
    __tablename__ = "timetable"
    __table_args__ = {"sqlite_autoincrement": True}
    id = Column(Integer, primary_key=True, autoincrement=True)
    course_id = Column(Integer, index=True)
    day = Column(String)
    start_time = Column(String)
    end_time = Column(String)
    room = Column(String)
    instructor = Column(String)
