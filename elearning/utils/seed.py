# elearning/utils/seed.py
from __future__ import annotations

import logging

from sqlalchemy import func, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from elearning.models.db import Base
from elearning.models.entities import Course, Quiz, TimetableEntry

log = logging.getLogger(__name__)

# (id, title, description, instructor, duration, credits, category)
SEED_COURSES = [
    (1, "Java Programming", "Learn Java from basics to advanced", "Dr. Smith", "8 weeks", 4, "Programming"),
    (2, "Web Development", "HTML, CSS, JavaScript fundamentals", "Prof. Johnson", "6 weeks", 3, "Web"),
    (3, "Database Systems", "SQL and database design principles", "Dr. Williams", "10 weeks", 4, "Database"),
    (4, "Data Structures", "Learn algorithms and data structures", "Dr. Anderson", "12 weeks", 5, "Programming"),
    (5, "Machine Learning", "Introduction to ML and AI concepts", "Prof. Martinez", "10 weeks", 4, "AI"),
]

# (id, course_id, question, options, answer)
SEED_QUIZZES = [
    (1, 1, "What is Java?",
     ["Programming Language", "Database", "Operating System", "Web Browser"], 0),
    (2, 1, "Java is platform independent?", ["True", "False"], 0),
    (3, 2, "What does HTML stand for?",
     ["Hyper Text Markup Language", "High Tech Modern Language",
      "Home Tool Markup Language", "Hyperlinks and Text Markup Language"], 0),
]

# (id, course_id, day, start_time, end_time, room, instructor)
SEED_TIMETABLE = [
    (1, 1, "Monday", "09:00", "11:00", "Room 101", "Dr. Smith"),
    (2, 1, "Wednesday", "09:00", "11:00", "Room 101", "Dr. Smith"),
    (3, 2, "Tuesday", "14:00", "16:00", "Lab 201", "Prof. Johnson"),
    (4, 2, "Thursday", "14:00", "16:00", "Lab 201", "Prof. Johnson"),
    (5, 3, "Monday", "11:00", "13:00", "Room 102", "Dr. Williams"),
    (6, 3, "Friday", "11:00", "13:00", "Room 102", "Dr. Williams"),
    (7, 4, "Tuesday", "09:00", "11:00", "Room 103", "Dr. Anderson"),
    (8, 5, "Wednesday", "14:00", "16:00", "Lab 202", "Prof. Martinez"),
]


def seed_sample_data(db: Session) -> bool:
    """
    Insert the sample courses, quizzes and timetable when no course exists yet.

    Returns True when rows were inserted. Safe to call on every startup.
    """
    count = db.scalar(select(func.count()).select_from(Course))
    if count:
        return False

    for cid, title, desc, instructor, duration, credits, category in SEED_COURSES:
        db.add(Course(id=cid, title=title, description=desc, instructor=instructor,
                      duration=duration, credits=credits, category=category))
    for qid, course_id, question, options, answer in SEED_QUIZZES:
        db.add(Quiz(id=qid, course_id=course_id, question=question, options=options, answer=answer))
    for tid, course_id, day, start, end, room, instructor in SEED_TIMETABLE:
        db.add(TimetableEntry(id=tid, course_id=course_id, day=day, start_time=start,
                              end_time=end, room=room, instructor=instructor))
    db.commit()
    log.info(
        "[DB] seeded %d courses, %d quizzes, %d timetable entries",
        len(SEED_COURSES), len(SEED_QUIZZES), len(SEED_TIMETABLE),
    )
    return True


def init_db(engine: Engine, session_factory: sessionmaker) -> None:
    """Create missing tables and seed an empty database. Errors propagate."""
    try:
        Base.metadata.create_all(bind=engine)
        with session_factory() as db:
            seed_sample_data(db)
    except Exception:
        log.exception("[DB] schema initialisation failed for %s", engine.url)
        raise
