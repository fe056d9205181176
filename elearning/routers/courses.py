import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from sqlalchemy import select, delete

from elearning.core.errors import EnvelopeRoute
from elearning.models.db import get_db
from elearning.models.entities import Course, Quiz
from elearning.models.schemas import CourseIn, CoursesOut, DeleteCourseIn, QuizzesOut, StatusOut

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["courses"], route_class=EnvelopeRoute)

@router.get("/courses", response_model=CoursesOut)
def list_courses(db: Session = Depends(get_db)):
    courses = db.scalars(select(Course).order_by(Course.id)).all()
    return {"courses": [{
        "id": c.id, "title": c.title, "description": c.description, "instructor": c.instructor,
        "duration": c.duration, "credits": c.credits, "category": c.category
    } for c in courses]}

@router.post("/add-course", response_model=StatusOut)
def add_course(payload: CourseIn, db: Session = Depends(get_db)):
    course = Course(
        title=payload.title,
        description=payload.description,
        instructor=payload.instructor,
        duration=payload.duration,
        credits=payload.credits,
        category=payload.category,
    )
    db.add(course); db.commit(); db.refresh(course)
    log.info("[COURSES] added course %s (%s)", course.id, course.title)
    return {"success": True, "message": "Course added successfully"}

@router.post("/delete-course", response_model=StatusOut)
def delete_course(payload: DeleteCourseIn, db: Session = Depends(get_db)):
    # enrollments, quizzes and timetable rows for the course are left in place
    result = db.execute(delete(Course).where(Course.id == payload.courseId))
    db.commit()
    if result.rowcount:
        log.info("[COURSES] deleted course %s", payload.courseId)
    else:
        log.warning("[COURSES] delete matched no course with id %s", payload.courseId)
    return {"success": True, "message": "Course deleted"}

@router.get("/quiz", response_model=QuizzesOut)
def list_quizzes(courseId: int = Query(...), db: Session = Depends(get_db)):
    quizzes = db.scalars(select(Quiz).where(Quiz.course_id == courseId).order_by(Quiz.id)).all()
    # the stored answer index stays server-side
    return {"quizzes": [{"id": q.id, "question": q.question, "options": q.options} for q in quizzes]}
