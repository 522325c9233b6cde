# tests/test_graphql_tasks.py

from taskboard.config.settings import settings
from taskboard.models import Task, TaskLabel, TaskLink
from taskboard.services.label_queries import LabelQueries
from taskboard.utils.dates import unix_now

TASK_FIELDS = "id title status description dueAt createdAt updatedAt closedAt"

CREATE_TASK = f"""
mutation CreateTask($input: CreateTaskInput!) {{
  createTask(input: $input) {{ {TASK_FIELDS} }}
}}
"""

UPDATE_TASK = f"""
mutation UpdateTask($id: ID!, $input: UpdateTaskInput!) {{
  updateTask(id: $id, input: $input) {{ {TASK_FIELDS} }}
}}
"""

DELETE_TASK = """
mutation DeleteTask($id: ID!) { deleteTask(id: $id) }
"""

GET_TASK = f"""
query GetTask($id: ID!) {{
  task(id: $id) {{
    {TASK_FIELDS}
    parent {{ id }}
    children {{ id }}
    labels {{ id name }}
    comments {{ id }}
  }}
}}
"""

LIST_TASKS = """
query ListTasks($search: String, $parentId: ID, $labelId: ID) {
  tasks(search: $search, parentId: $parentId, labelId: $labelId) { id title }
}
"""


def _create(gql, **input_fields):
    body = gql(CREATE_TASK, {"input": input_fields})
    assert "errors" not in body, body
    return body["data"]["createTask"]


def test_create_task_defaults_to_todo(gql) -> None:
    created = _create(gql, title="x")

    assert created["status"] == "todo"
    assert created["description"] is None
    assert created["dueAt"] is None
    assert created["closedAt"] is None
    assert created["createdAt"].endswith("Z")

    fetched = gql(GET_TASK, {"id": created["id"]})["data"]["task"]
    assert fetched["status"] == "todo"
    assert fetched["title"] == "x"
    assert fetched["comments"] == []


def test_create_task_with_due_date(gql) -> None:
    created = _create(gql, title="ship", description="release", status="in_progress", dueAt="2025-12-31T00:00:00.000Z")

    assert created["status"] == "in_progress"
    assert created["description"] == "release"
    assert created["dueAt"] == "2025-12-31T00:00:00.000Z"


def test_create_task_with_empty_title_is_rejected(gql, db) -> None:
    body = gql(CREATE_TASK, {"input": {"title": ""}})

    assert body["data"] is None
    error = body["errors"][0]
    assert error["message"] == "Task title is required and cannot be empty"
    assert error["extensions"]["code"] == "BAD_USER_INPUT"
    assert db.query(Task).count() == 0


def test_create_task_with_bad_due_date_is_rejected(gql) -> None:
    body = gql(CREATE_TASK, {"input": {"title": "x", "dueAt": "next tuesday"}})

    assert body["errors"][0]["message"].startswith("Invalid due date format")


def test_unknown_status_falls_back_to_todo(gql) -> None:
    created = _create(gql, title="x", status="bogus")

    assert created["status"] == "todo"


def test_strict_status_rejects_unknown_status(gql, monkeypatch) -> None:
    monkeypatch.setattr(settings, "STRICT_STATUS", True)

    body = gql(CREATE_TASK, {"input": {"title": "x", "status": "bogus"}})

    assert body["errors"][0]["message"].startswith("Invalid task status")


def test_update_with_bogus_status_persists_todo(gql, db) -> None:
    created = _create(gql, title="x", status="done")

    body = gql(UPDATE_TASK, {"id": created["id"], "input": {"status": "bogus"}})

    assert body["data"]["updateTask"]["status"] == "todo"
    assert db.query(Task).filter(Task.id == created["id"]).one().state == "todo"


def test_update_changes_only_given_fields(gql) -> None:
    created = _create(gql, title="old", description="keep")

    updated = gql(UPDATE_TASK, {"id": created["id"], "input": {"title": "new"}})["data"]["updateTask"]

    assert updated["title"] == "new"
    assert updated["description"] == "keep"
    assert updated["createdAt"] == created["createdAt"]
    assert updated["updatedAt"] >= updated["createdAt"]


def test_update_clears_due_date_with_null(gql) -> None:
    created = _create(gql, title="x", dueAt="2030-01-01T00:00:00Z")

    updated = gql(UPDATE_TASK, {"id": created["id"], "input": {"dueAt": None}})["data"]["updateTask"]

    assert updated["dueAt"] is None


def test_update_unknown_task_returns_null(gql) -> None:
    body = gql(UPDATE_TASK, {"id": "missing", "input": {"title": "x"}})

    assert "errors" not in body
    assert body["data"]["updateTask"] is None


def test_update_without_fields_is_rejected(gql) -> None:
    body = gql(UPDATE_TASK, {"id": "anything", "input": {}})

    assert body["errors"][0]["message"] == "At least one field must be provided for update"


def test_create_with_parent_links_subtask(gql) -> None:
    parent = _create(gql, title="parent")
    child = _create(gql, title="child", parentId=parent["id"])

    fetched_parent = gql(GET_TASK, {"id": parent["id"]})["data"]["task"]
    fetched_child = gql(GET_TASK, {"id": child["id"]})["data"]["task"]

    assert fetched_parent["children"] == [{"id": child["id"]}]
    assert fetched_parent["parent"] is None
    assert fetched_child["parent"] == {"id": parent["id"]}


def test_create_with_unknown_parent_is_atomic(gql, db) -> None:
    body = gql(CREATE_TASK, {"input": {"title": "orphan", "parentId": "no-such-task"}})

    # Datastore errors are masked and nothing from the mutation is kept
    assert body["errors"][0]["message"] == "Unexpected error."
    assert db.query(Task).count() == 0
    assert db.query(TaskLink).count() == 0


def test_update_parent_replaces_and_detaches(gql) -> None:
    first = _create(gql, title="first")
    second = _create(gql, title="second")
    child = _create(gql, title="child", parentId=first["id"])

    gql(UPDATE_TASK, {"id": child["id"], "input": {"parentId": second["id"]}})
    fetched = gql(GET_TASK, {"id": child["id"]})["data"]["task"]
    assert fetched["parent"] == {"id": second["id"]}
    assert gql(GET_TASK, {"id": first["id"]})["data"]["task"]["children"] == []

    gql(UPDATE_TASK, {"id": child["id"], "input": {"parentId": None}})
    assert gql(GET_TASK, {"id": child["id"]})["data"]["task"]["parent"] is None


def test_delete_task_removes_links_in_both_directions(gql, db, make_label) -> None:
    grandparent = _create(gql, title="grandparent")
    middle = _create(gql, title="middle", parentId=grandparent["id"])
    leaf = _create(gql, title="leaf", parentId=middle["id"])
    label_id = make_label(name="bug")
    LabelQueries(db).add_task_label(middle["id"], label_id)
    db.commit()

    body = gql(DELETE_TASK, {"id": middle["id"]})

    assert body["data"]["deleteTask"] == middle["id"]
    assert gql(GET_TASK, {"id": middle["id"]})["data"]["task"] is None
    assert db.query(TaskLink).count() == 0
    assert db.query(TaskLabel).count() == 0
    assert gql(GET_TASK, {"id": leaf["id"]})["data"]["task"]["parent"] is None
    assert gql(GET_TASK, {"id": grandparent["id"]})["data"]["task"]["children"] == []


def test_delete_unknown_task_returns_null(gql) -> None:
    assert gql(DELETE_TASK, {"id": "missing"})["data"]["deleteTask"] is None


def test_tasks_without_filters_lists_everything(gql) -> None:
    _create(gql, title="one")
    _create(gql, title="two")

    tasks = gql(LIST_TASKS)["data"]["tasks"]

    assert sorted(task["title"] for task in tasks) == ["one", "two"]


def test_tasks_search_is_substring(gql) -> None:
    _create(gql, title="My Task 1")
    _create(gql, title="Groceries")

    tasks = gql(LIST_TASKS, {"search": "Task"})["data"]["tasks"]

    assert [task["title"] for task in tasks] == ["My Task 1"]


def test_tasks_filter_precedence(gql, db, make_label) -> None:
    parent = _create(gql, title="parent")
    child = _create(gql, title="child", parentId=parent["id"])
    labelled = _create(gql, title="labelled")
    label_id = make_label(name="bug")
    LabelQueries(db).add_task_label(labelled["id"], label_id)
    db.commit()

    by_label = gql(LIST_TASKS, {"labelId": str(label_id)})["data"]["tasks"]
    assert [task["id"] for task in by_label] == [labelled["id"]]

    by_parent = gql(LIST_TASKS, {"parentId": parent["id"], "labelId": str(label_id)})["data"]["tasks"]
    assert [task["id"] for task in by_parent] == [child["id"]]

    # search wins; labelId is ignored rather than combined
    by_search = gql(LIST_TASKS, {"search": "child", "labelId": str(label_id)})["data"]["tasks"]
    assert [task["id"] for task in by_search] == [child["id"]]


def test_tasks_with_non_numeric_label_id_is_empty(gql) -> None:
    _create(gql, title="x")

    assert gql(LIST_TASKS, {"labelId": "abc"})["data"]["tasks"] == []


def test_tasks_by_status_and_overdue(gql, make_task) -> None:
    now = unix_now()
    late = make_task(title="late", state="in_progress", due_at=now - 600)
    make_task(title="late but done", state="done", due_at=now - 600)
    make_task(title="fresh", state="todo", due_at=now + 600)

    body = gql("""
        query {
          overdueTasks { id }
          tasksByStatus(status: "done") { title }
        }
    """)

    assert body["data"]["overdueTasks"] == [{"id": late}]
    assert body["data"]["tasksByStatus"] == [{"title": "late but done"}]


def test_nested_children_are_batched_per_level(gql) -> None:
    parent = _create(gql, title="parent")
    for index in range(3):
        _create(gql, title=f"child {index}", parentId=parent["id"])

    body = gql("""
        query {
          tasks { title parent { title } children { title } labels { name } }
        }
    """)

    tasks = {task["title"]: task for task in body["data"]["tasks"]}
    assert sorted(child["title"] for child in tasks["parent"]["children"]) == ["child 0", "child 1", "child 2"]
    assert all(tasks[f"child {i}"]["parent"] == {"title": "parent"} for i in range(3))
    assert tasks["parent"]["labels"] == []


def test_due_date_out_of_range_is_rejected_and_listing_still_works(gql, db) -> None:
    _create(gql, title="near", dueAt="2030-01-01T00:00:00Z")

    body = gql(CREATE_TASK, {"input": {"title": "far", "dueAt": "9999-12-31T23:00:00-05:00"}})

    assert body["errors"][0]["message"].startswith("Invalid due date format")
    assert body["errors"][0]["extensions"]["code"] == "BAD_USER_INPUT"
    assert db.query(Task).count() == 1

    listing = gql(LIST_TASKS)
    assert "errors" not in listing
    assert [task["title"] for task in listing["data"]["tasks"]] == ["near"]


def test_update_with_out_of_range_due_date_keeps_row(gql) -> None:
    created = _create(gql, title="x", dueAt="2030-01-01T00:00:00Z")

    body = gql(UPDATE_TASK, {"id": created["id"], "input": {"dueAt": "0001-01-01T00:00:00+01:00"}})

    assert body["errors"][0]["extensions"]["code"] == "BAD_USER_INPUT"
    assert gql(GET_TASK, {"id": created["id"]})["data"]["task"]["dueAt"] == "2030-01-01T00:00:00.000Z"


def test_due_date_with_offset_is_stored_as_utc(gql) -> None:
    created = _create(gql, title="x", dueAt="2030-01-01T02:00:00+02:00")

    assert created["dueAt"] == "2030-01-01T00:00:00.000Z"


def test_reparenting_in_one_document_sees_fresh_children(gql) -> None:
    first = _create(gql, title="first")
    second = _create(gql, title="second")
    child = _create(gql, title="child", parentId=first["id"])

    body = gql(
        """
        mutation Move($child: ID!, $first: ID!, $second: ID!) {
          before: updateTask(id: $first, input: {title: "first"}) { children { id } }
          move: updateTask(id: $child, input: {parentId: $second}) { parent { id } }
          after: updateTask(id: $first, input: {title: "first"}) { children { id } }
        }
        """,
        {"child": child["id"], "first": first["id"], "second": second["id"]},
    )

    assert body["data"]["before"]["children"] == [{"id": child["id"]}]
    assert body["data"]["move"]["parent"] == {"id": second["id"]}
    assert body["data"]["after"]["children"] == []
