from sqlalchemy import select

from elearning.models.entities import Enrollment, Quiz, TimetableEntry
from elearning.utils.seed import SEED_COURSES


def _course_ids(client):
    return [c["id"] for c in client.get("/api/courses").json()["courses"]]


def test_seeded_courses_listed(client):
    courses = client.get("/api/courses").json()["courses"]
    assert len(courses) == 5
    assert courses[0] == {
        "id": 1,
        "title": "Java Programming",
        "description": "Learn Java from basics to advanced",
        "instructor": "Dr. Smith",
        "duration": "8 weeks",
        "credits": 4,
        "category": "Programming",
    }
    assert [c["title"] for c in courses] == [row[1] for row in SEED_COURSES]


def test_add_course(client):
    res = client.post("/api/add-course", json={
        "title": "Compilers",
        "description": "Parsing and code generation",
        "instructor": "Dr. Aho",
        "duration": "14 weeks",
        "credits": 5,
        "category": "Programming",
    })
    assert res.json() == {"success": True, "message": "Course added successfully"}

    courses = client.get("/api/courses").json()["courses"]
    assert len(courses) == 6
    added = courses[-1]
    assert added["id"] == 6
    assert added["title"] == "Compilers"
    assert added["credits"] == 5


def test_add_course_missing_field(client):
    res = client.post("/api/add-course", json={"title": "Half a course"})
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is False
    assert "description" in body["message"]
    assert len(_course_ids(client)) == 5


def test_delete_course_leaves_dependents(client):
    client.post("/api/enroll", json={"userId": 7, "courseId": 1})

    res = client.post("/api/delete-course", json={"courseId": 1})
    assert res.json() == {"success": True, "message": "Course deleted"}
    assert 1 not in _course_ids(client)

    with client.app.state.session_factory() as db:
        assert db.scalars(select(Enrollment).where(Enrollment.course_id == 1)).all()
        assert db.scalars(select(Quiz).where(Quiz.course_id == 1)).all()
        assert db.scalars(select(TimetableEntry).where(TimetableEntry.course_id == 1)).all()


def test_delete_unknown_course_still_succeeds(client):
    res = client.post("/api/delete-course", json={"courseId": 999})
    assert res.json()["success"] is True
    assert len(_course_ids(client)) == 5


def test_deleted_course_id_not_reused(client):
    client.post("/api/delete-course", json={"courseId": 5})
    client.post("/api/add-course", json={
        "title": "Deep Learning", "description": "Neural networks", "instructor": "Dr. Ng",
        "duration": "8 weeks", "credits": 3, "category": "AI",
    })
    assert _course_ids(client) == [1, 2, 3, 4, 6]


def test_restart_does_not_reseed(make_client):
    first = make_client()
    first.post("/api/delete-course", json={"courseId": 2})
    second = make_client()
    assert [c["id"] for c in second.get("/api/courses").json()["courses"]] == [1, 3, 4, 5]
