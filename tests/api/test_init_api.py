"""GET /init seeding and the root health endpoint."""

from app.models.student import Student


def test_init_returns_empty_200(client):
    res = client.get("/init")
    assert res.status_code == 200
    assert res.content == b""


def test_init_then_get_student_500(client):
    client.get("/init")
    res = client.get("/students/500")
    assert res.status_code == 200
    assert res.json() == {"id": 500, "name": "Kamal_500", "age": 57, "email": "kamal500@gmail.com"}


def test_init_seeds_999_students(client):
    client.get("/init")
    assert len(client.get("/students", params={"limit": 5000}).json()) == 999
    assert client.get("/students/999").status_code == 200
    assert client.get("/students/1000").status_code == 404


def test_init_default_page_is_first_100_by_id(client):
    client.get("/init")
    ids = [s["id"] for s in client.get("/students").json()]
    assert ids == list(range(1, 101))


def test_init_overwrites_existing_ids_and_keeps_others(client, test_db, session_factory):
    test_db.add_all([
        Student(id=7, name="Custom", age=18, email="custom@example.com"),
        Student(id=1500, name="Outside", age=60, email="outside@example.com"),
    ])
    test_db.commit()

    client.get("/init")

    with session_factory() as db:
        overwritten = db.get(Student, 7)
        untouched = db.get(Student, 1500)
    assert (overwritten.name, overwritten.age, overwritten.email) == ("Kamal_7", 57, "kamal7@gmail.com")
    assert untouched.name == "Outside"


def test_init_is_idempotent(client):
    assert client.get("/init").status_code == 200
    assert client.get("/init").status_code == 200
    assert len(client.get("/students", params={"limit": 5000}).json()) == 999


def test_root_health_check(client):
    res = client.get("/")
    assert res.status_code == 200
    assert res.json()["docs"] == "/docs"
