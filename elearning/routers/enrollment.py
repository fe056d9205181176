from datetime import date

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from sqlalchemy import select

from elearning.core.errors import EnvelopeRoute
from elearning.models.db import get_db
from elearning.models.entities import Course, Enrollment
from elearning.models.schemas import EnrollIn, ProgressOut, StatusOut

router = APIRouter(prefix="/api", tags=["enrollment"], route_class=EnvelopeRoute)

@router.post("/enroll", response_model=StatusOut)
def enroll(payload: EnrollIn, db: Session = Depends(get_db)):
    # duplicate enrollments are allowed
    db.add(Enrollment(
        user_id=payload.userId,
        course_id=payload.courseId,
        progress=0,
        enrollment_date=date.today(),
    ))
    db.commit()
    return {"success": True, "message": "Enrolled successfully"}

@router.get("/progress", response_model=ProgressOut)
def progress(userId: int = Query(...), db: Session = Depends(get_db)):
    rows = db.execute(
        select(Course, Enrollment.progress, Enrollment.enrollment_date)
        .join(Enrollment, Enrollment.course_id == Course.id)
        .where(Enrollment.user_id == userId)
        .order_by(Enrollment.id)
    ).all()
    return {"enrolled": [{
        "id": c.id,
        "title": c.title,
        "instructor": c.instructor,
        "credits": c.credits,
        "progress": pct or 0,
        "enrollmentDate": enrolled_on,
    } for c, pct, enrolled_on in rows]}
