from elearning.models.entities import Quiz


def test_quiz_options_split_into_list(client):
    quizzes = client.get("/api/quiz?courseId=1").json()["quizzes"]
    assert [q["id"] for q in quizzes] == [1, 2]
    assert quizzes[0] == {
        "id": 1,
        "question": "What is Java?",
        "options": ["Programming Language", "Database", "Operating System", "Web Browser"],
    }
    assert quizzes[1]["options"] == ["True", "False"]


def test_quiz_answer_not_exposed(client):
    for q in client.get("/api/quiz?courseId=2").json()["quizzes"]:
        assert "answer" not in q


def test_option_count_matches_stored_tokens(client):
    with client.app.state.session_factory() as db:
        raw = db.connection().exec_driver_sql("SELECT options FROM quizzes WHERE id = 3").scalar_one()
    options = client.get("/api/quiz?courseId=2").json()["quizzes"][0]["options"]
    assert len(options) == len(raw.split("|")) == 4


def test_quiz_for_course_without_questions(client):
    assert client.get("/api/quiz?courseId=5").json() == {"quizzes": []}


def test_quiz_options_written_through_orm(client):
    with client.app.state.session_factory() as db:
        db.add(Quiz(course_id=4, question="Stack order?", options=["LIFO", "FIFO", "Random"], answer=0))
        db.commit()
    options = client.get("/api/quiz?courseId=4").json()["quizzes"][0]["options"]
    assert options == ["LIFO", "FIFO", "Random"]


def test_quiz_requires_course_id(client):
    body = client.get("/api/quiz").json()
    assert "courseId" in body["error"]
