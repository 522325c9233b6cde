"""
Database Seeding Script
Creates database tables and populates them with demo labels, tasks and subtasks
"""

from datetime import datetime, timedelta, timezone

from create_tables import create_tables
from taskboard.database import SessionLocal, transaction
from taskboard.services.label_queries import LabelQueries
from taskboard.services.task_link_queries import TaskLinkQueries
from taskboard.services.task_queries import TaskQueries
from taskboard.utils.dates import to_unix, unix_now

DEMO_LABELS = [
    {"name": "bug", "color": "#d73a4a"},
    {"name": "feature", "color": "#a2eeef"},
    {"name": "docs", "color": "#0075ca"},
    {"name": "chore", "color": None},
]

# parent refers to another demo task by title
DEMO_TASKS = [
    {
        "title": "Launch public beta",
        "description": "Everything that has to happen before the beta invite goes out",
        "state": "in_progress",
        "due_in_days": 14,
        "labels": ["feature"],
    },
    {
        "title": "Write onboarding guide",
        "description": "Short guide covering task creation, labels and subtasks",
        "state": "todo",
        "due_in_days": 7,
        "labels": ["docs"],
        "parent": "Launch public beta",
    },
    {
        "title": "Fix due date shown in wrong timezone",
        "description": "Due dates render in server time instead of UTC",
        "state": "todo",
        "due_in_days": -2,
        "labels": ["bug"],
        "parent": "Launch public beta",
    },
    {
        "title": "Set up nightly database backup",
        "description": None,
        "state": "done",
        "due_in_days": -5,
        "labels": ["chore"],
    },
    {
        "title": "Evaluate label colour palette",
        "description": "Check contrast of the default label colours",
        "state": "cancelled",
        "due_in_days": None,
        "labels": [],
    },
]


def seed(db):
    tasks = TaskQueries(db)
    labels = LabelQueries(db)
    task_links = TaskLinkQueries(db)
    now = unix_now()

    with transaction(db):
        label_ids = {}
        for item in DEMO_LABELS:
            label = labels.create_label({**item, "created_at": now})
            label_ids[label.name] = label.id
            print(f"✅ Label created: {label.name} (ID: {label.id})")

        task_ids = {}
        for item in DEMO_TASKS:
            due_at = None
            if item["due_in_days"] is not None:
                due_at = to_unix(datetime.now(timezone.utc) + timedelta(days=item["due_in_days"]))

            created = tasks.create_task({
                "title": item["title"],
                "description": item["description"],
                "state": item["state"],
                "due_at": due_at,
                "created_at": now,
                "updated_at": now,
                "closed_at": None,
            })
            task_ids[item["title"]] = created["id"]
            print(f"✅ Task created: {item['title']} (ID: {created['id']})")

            for name in item["labels"]:
                labels.add_task_label(created["id"], label_ids[name])

        for item in DEMO_TASKS:
            if item.get("parent"):
                task_links.create_task_link(task_ids[item["parent"]], task_ids[item["title"]])
                print(f"🔗 Subtask link: {item['parent']} -> {item['title']}")

    return task_ids


def main():
    print(f"\n{'='*60}")
    print("🚀 Seeding Taskboard database")
    print(f"{'='*60}")

    create_tables(drop_existing=True)

    db = SessionLocal()
    try:
        task_ids = seed(db)
        print(f"\n[SUCCESS] Seeded {len(DEMO_LABELS)} labels and {len(task_ids)} tasks")
    except Exception as e:
        print(f"[ERROR] Seeding failed: {e}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
