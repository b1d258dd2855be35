"""
Database schema initialization script
-------------------------------------
Creates the businesses/reviews/subscriptions tables and lists what exists.
"""

from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(PROJECT_ROOT / ".env")

from sqlalchemy import inspect

from trustlet.core.config import get_settings
from trustlet.db.init_db import init_db
from trustlet.db.session import create_engine_from_settings


def init_db_schema() -> None:
    """Create tables and print the resulting table names."""
    engine = create_engine_from_settings(get_settings())
    print("Initializing database schema...")
    init_db(engine)
    print("Tables created")

    print("\nTables:")
    for name in sorted(inspect(engine).get_table_names()):
        print(f"  - {name}")


if __name__ == "__main__":
    init_db_schema()
