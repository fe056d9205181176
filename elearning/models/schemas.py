from pydantic import BaseModel
import datetime as dt
from typing import List, Optional

# ---------- requests ----------

class RegisterIn(BaseModel):
    # blank and missing are both reported as "All fields are required"
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    role: Optional[str] = None

class LoginIn(BaseModel):
    username: str
    password: str

class EnrollIn(BaseModel):
    userId: int
    courseId: int

class MarkAttendanceIn(BaseModel):
    userId: int
    courseId: int
    status: str

class CourseIn(BaseModel):
    title: str
    description: str
    instructor: str
    duration: str
    credits: int
    category: str

class DeleteCourseIn(BaseModel):
    courseId: int

class TimetableEntryIn(BaseModel):
    courseId: int
    day: str
    startTime: str
    endTime: str
    room: str
    instructor: str

# ---------- responses ----------

class StatusOut(BaseModel):
    success: bool
    message: str

class UserOut(BaseModel):
    id: int
    username: str
    role: Optional[str] = None

class LoginOut(BaseModel):
    success: bool
    user: UserOut

class CourseOut(BaseModel):
    id: int
    title: Optional[str] = None
    description: Optional[str] = None
    instructor: Optional[str] = None
    duration: Optional[str] = None
    credits: Optional[int] = None
    category: Optional[str] = None

class CoursesOut(BaseModel):
    courses: List[CourseOut]

class EnrolledCourseOut(BaseModel):
    id: int
    title: Optional[str] = None
    instructor: Optional[str] = None
    credits: Optional[int] = None
    progress: int
    enrollmentDate: Optional[dt.date] = None

class ProgressOut(BaseModel):
    enrolled: List[EnrolledCourseOut]

class QuizOut(BaseModel):
    id: int
    question: Optional[str] = None
    options: List[str]

class QuizzesOut(BaseModel):
    quizzes: List[QuizOut]

class AttendanceOut(BaseModel):
    courseTitle: Optional[str] = None
    date: Optional[dt.date] = None
    status: Optional[str] = None

class AttendanceListOut(BaseModel):
    attendance: List[AttendanceOut]

class TimetableEntryOut(BaseModel):
    id: int
    courseId: int
    courseTitle: Optional[str] = None
    day: Optional[str] = None
    startTime: Optional[str] = None
    endTime: Optional[str] = None
    room: Optional[str] = None
    instructor: Optional[str] = None

class TimetableOut(BaseModel):
    timetable: List[TimetableEntryOut]
