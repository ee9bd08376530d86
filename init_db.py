from dashboard.backend.src.db import get_engine
from dashboard.backend.src.db.base import Base
from dashboard.backend.src.models import *  # noqa


def init_db():
    engine = get_engine()
    print(f"Connecting to {engine.url.render_as_string(hide_password=True)}")
    Base.metadata.create_all(bind=engine)
    print("Tables created successfully!")


if __name__ == "__main__":
    init_db()
