import pytest

from htmx_blog.errors import BindingError, BlogError, NotFoundError, PersistenceError
from htmx_blog.models import db


@pytest.mark.parametrize("error_class, status_code", [
    (BindingError, 400),
    (NotFoundError, 404),
    (PersistenceError, 500),
])
def test_status_codes(error_class, status_code):
    error = error_class("boom")

    assert isinstance(error, BlogError)
    assert error.status_code == status_code
    assert error.message == "boom"
    assert str(error) == "boom"


def test_persistence_error_on_create(app, client, monkeypatch):
    store = app.extensions["post_store"]

    def fail(title, content):
        raise PersistenceError("Could not create post: disk I/O error")

    monkeypatch.setattr(store, "create", fail)
    response = client.post("/create", data={"title": "t", "content": "c"})

    assert response.status_code == 500
    assert response.get_json() == {"error": "Internal server error"}


def test_store_wraps_database_errors(app, client, caplog):
    # without the table every query fails inside SQLAlchemy
    with app.app_context():
        db.drop_all()

    response = client.get("/")

    assert response.status_code == 500
    assert response.get_json() == {"error": "Internal server error"}
    assert b"SELECT" not in response.data
    assert b"no such table" not in response.data
    # the details stay in the log
    assert "Could not list posts" in caplog.text


def test_health_reports_unavailable_database(app, client, monkeypatch):
    store = app.extensions["post_store"]

    def fail():
        raise PersistenceError("Database unavailable: connection refused")

    monkeypatch.setattr(store, "ping", fail)
    response = client.get("/health")

    assert response.status_code == 503
    assert response.get_json() == {"status": "unhealthy", "database": "unavailable"}
