import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from app.core.db import create_db_engine, get_session, init_db
from app.main import create_app


# create in-memory test database
@pytest.fixture(name="engine")
def engine_fixture():
    engine = create_db_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture(name="session")
def session_fixture(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture(name="client")
def client_fixture(engine, session: Session):
    app = create_app(engine=engine)

    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture
def rocky():
    return {
        "name": "Rocky",
        "favoriteFood": "Sushi",
        "favoriteMovie": "Back to The Future",
        "status": "Inactive",
    }


@pytest.fixture
def batch():
    return [
        {
            "name": "Miroslav",
            "favoriteFood": "Sushi",
            "favoriteMovie": "American Psycho",
            "status": "Active",
        },
        {
            "name": "Donny",
            "favoriteFood": "Singapore chow mei fun",
            "favoriteMovie": "The Princess Bride",
            "status": "Active",
        },
        {
            "name": "Matt",
            "favoriteFood": "Brisket Tacos",
            "favoriteMovie": "The Princess Bride",
            "status": "Inactive",
        },
    ]
