from app.core.config import settings
from app.core.logging import setup_logging
from app.db.session import engine, Session, init_db

from app.db.seed import seed_all

setup_logging(settings.LOG_LEVEL)


def run_seed():
    init_db()
    with Session(engine) as session:
        seed_all(session=session, seed_path="app/db/seed_data.yaml")


run_seed()
