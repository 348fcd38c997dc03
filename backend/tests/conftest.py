from pathlib import Path
from dotenv import load_dotenv
import pytest

# Load environment variables for tests
load_dotenv(Path(__file__).resolve().parents[1] / '.env.test')

from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.main import app  # noqa: E402
from app.models.base import BaseModel  # noqa: E402
from app.api.dependencies import get_db  # noqa: E402
from app.db_utils import seed_categories  # noqa: E402


@pytest.fixture
def engine():
    engine = create_engine(
        'sqlite:///:memory:',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
    )
    BaseModel.metadata.create_all(engine)
    seed_categories(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def Session(engine):
    """Session factory bound to the in-memory database, wired into the app."""
    Session = sessionmaker(bind=engine, expire_on_commit=False)

    def override_db():
        db = Session()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_db
    yield Session
    app.dependency_overrides.clear()


@pytest.fixture
def db(Session):
    session = Session()
    yield session
    session.close()
