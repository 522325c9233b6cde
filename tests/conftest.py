# tests/conftest.py

import uuid

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from main import app
from taskboard.database import Base, get_db
from taskboard.services.label_queries import LabelQueries
from taskboard.services.task_link_queries import TaskLinkQueries
from taskboard.services.task_queries import TaskQueries
from taskboard.utils.dates import unix_now


@pytest.fixture()
def engine():
    """
    In-memory SQLite shared by every session of a test.

    StaticPool keeps one connection alive, so the schema and data survive
    across the sessions opened by the app and by the test itself.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        # No context manager: startup hooks (table creation, scheduler) stay off
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def gql(client):
    """POST a GraphQL document and return the decoded JSON body"""

    def run(query, variables=None):
        response = client.post("/graphql", json={"query": query, "variables": variables or {}})
        return response.json()

    return run


@pytest.fixture()
def make_task(db):
    """Insert a task row directly and commit it"""

    def create(title="Task", state="todo", due_at=None, description=None, task_id=None):
        now = unix_now()
        row = TaskQueries(db).create_task({
            "id": task_id or str(uuid.uuid4()),
            "title": title,
            "description": description,
            "state": state,
            "due_at": due_at,
            "created_at": now,
            "updated_at": now,
            "closed_at": None,
        })
        db.commit()
        return row["id"]

    return create


@pytest.fixture()
def make_label(db):
    def create(name="label", color=None):
        label = LabelQueries(db).create_label({"name": name, "color": color})
        db.commit()
        return label.id

    return create


@pytest.fixture()
def link_tasks(db):
    def link(parent_id, child_id, relation="subtask"):
        TaskLinkQueries(db).create_task_link(parent_id, child_id, relation)
        db.commit()

    return link
