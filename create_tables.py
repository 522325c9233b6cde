# create_tables.py
from taskboard.database import Base, engine
import taskboard.models  # noqa: F401  (registers tables on Base.metadata)

def create_tables(drop_existing: bool = True):
    """Create all tables, optionally dropping the existing ones first"""
    try:
        if drop_existing:
            # drop_all orders the drops by foreign key dependencies
            Base.metadata.drop_all(bind=engine)

        Base.metadata.create_all(bind=engine)
        print(f"✅ All tables created successfully on {engine.url.render_as_string(hide_password=True)}")
        print("   Tables: " + ", ".join(sorted(Base.metadata.tables)))

    except Exception as e:
        print(f"❌ Error creating tables: {e}")
        raise

if __name__ == "__main__":
    import sys
    create_tables(drop_existing="--keep" not in sys.argv)
