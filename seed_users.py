"""
Create the users table and insert the demo accounts.

Run this from the project root:

    (.venv) python seed_users.py

Every demo account gets the password "rahasia". Accounts whose email is
already in the database are left alone, so the script can be re-run.
"""

import logging

from app.core.config import settings
from app.db.init_db import DEMO_USERS, init_db, seed_initial_data
from app.db.session import SessionLocal

logger = logging.getLogger("seed_users")


def main() -> None:
    logging.basicConfig(level=settings.log_level)
    init_db()

    db = SessionLocal()
    try:
        inserted = seed_initial_data(db)
        logger.info("Checked %d demo users, inserted %d new users rows", len(DEMO_USERS), inserted)
    finally:
        db.close()


if __name__ == "__main__":
    main()
