from datetime import date, datetime

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from sqlalchemy import select

from elearning.core.errors import EnvelopeRoute
from elearning.models.db import get_db
from elearning.models.entities import AttendanceRecord, Course
from elearning.models.schemas import AttendanceListOut, MarkAttendanceIn, StatusOut

router = APIRouter(prefix="/api", tags=["attendance"], route_class=EnvelopeRoute)

@router.post("/mark-attendance", response_model=StatusOut)
def mark_attendance(payload: MarkAttendanceIn, db: Session = Depends(get_db)):
    # append-only: no enrollment check, no one-per-day rule
    db.add(AttendanceRecord(
        user_id=payload.userId,
        course_id=payload.courseId,
        date=date.today(),
        status=payload.status,
        marked_at=datetime.now(),
    ))
    db.commit()
    return {"success": True, "message": "Attendance marked"}

@router.get("/attendance", response_model=AttendanceListOut)
def attendance(userId: int = Query(...), db: Session = Depends(get_db)):
    rows = db.execute(
        select(Course.title, AttendanceRecord.date, AttendanceRecord.status)
        .join(Course, AttendanceRecord.course_id == Course.id)
        .where(AttendanceRecord.user_id == userId)
        .order_by(AttendanceRecord.date.desc(), AttendanceRecord.id.desc())
    ).all()
    return {"attendance": [
        {"courseTitle": title, "date": day, "status": status} for title, day, status in rows
    ]}
