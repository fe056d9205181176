from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from sqlalchemy import select, case

from elearning.core.errors import EnvelopeRoute
from elearning.models.db import get_db
from elearning.models.entities import Course, Enrollment, TimetableEntry
from elearning.models.schemas import StatusOut, TimetableEntryIn, TimetableOut

router = APIRouter(prefix="/api", tags=["timetable"], route_class=EnvelopeRoute)

WEEKDAY_RANK = {
    "Monday": 1,
    "Tuesday": 2,
    "Wednesday": 3,
    "Thursday": 4,
    "Friday": 5,
    "Saturday": 6,
    "Sunday": 7,
}

# unrecognised day names sort after Sunday
_day_rank = case(WEEKDAY_RANK, value=TimetableEntry.day, else_=len(WEEKDAY_RANK) + 1)

@router.get("/timetable", response_model=TimetableOut)
def timetable(userId: Optional[int] = Query(None), db: Session = Depends(get_db)):
    stmt = (
        select(TimetableEntry, Course.title)
        .join(Course, TimetableEntry.course_id == Course.id)
        .order_by(_day_rank, TimetableEntry.start_time, TimetableEntry.id)
    )
    if userId is not None:
        enrolled = select(Enrollment.course_id).where(Enrollment.user_id == userId)
        stmt = stmt.where(TimetableEntry.course_id.in_(enrolled))
    rows = db.execute(stmt).all()
    return {"timetable": [{
        "id": t.id,
        "courseId": t.course_id,
        "courseTitle": title,
        "day": t.day,
        "startTime": t.start_time,
        "endTime": t.end_time,
        "room": t.room,
        "instructor": t.instructor,
    } for t, title in rows]}

@router.post("/add-timetable", response_model=StatusOut)
def add_timetable(payload: TimetableEntryIn, db: Session = Depends(get_db)):
    # no overlap or time-format checks
    db.add(TimetableEntry(
        course_id=payload.courseId,
        day=payload.day,
        start_time=payload.startTime,
        end_time=payload.endTime,
        room=payload.room,
        instructor=payload.instructor,
    ))
    db.commit()
    return {"success": True, "message": "Timetable entry added"}
