import os
import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path so tests can import 'app' package
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Must be set before app.database creates the engine
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

from app.database import Base, SessionLocal, engine  # noqa: E402
from app.models import User  # noqa: E402
from app.auth.utils import get_password_hash  # noqa: E402

PASSWORD = "s3cret-pass"


@pytest.fixture(autouse=True)
def reset_db():
    # Drop all and re-create so every test starts from an empty schema
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def _make_user(db, email, role):
    user = User(
        email=email,
        full_name=email.split("@")[0].title(),
        role=role,
        password_hash=get_password_hash(PASSWORD),
        is_active=True,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def admin(db):
    return _make_user(db, "admin@admin.com", "Admin")


@pytest.fixture
def alice(db):
    return _make_user(db, "alice@flixat.com", "User")


@pytest.fixture
def bob(db):
    return _make_user(db, "bob@flixat.com", "User")

