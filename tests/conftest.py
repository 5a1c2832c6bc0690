import os
import pytest
import sqlalchemy as sa
import sqlalchemy.orm

from tests.util.models import Base


# URL of the database to connect to
DATABASE_URL = os.getenv('DATABASE_URL', 'sqlite://')


@pytest.fixture(scope='function')
def engine() -> sa.engine.Engine:
    return sa.create_engine(DATABASE_URL)


@pytest.fixture(scope='function')
def connection(engine: sa.engine.Engine) -> sa.engine.Connection:
    with engine.connect() as conn:
        Base.metadata.create_all(conn)
        try:
            yield conn
        finally:
            Base.metadata.drop_all(conn)


@pytest.fixture(scope='function')
def ssn(connection: sa.engine.Connection) -> sa.orm.Session:
    with sa.orm.Session(bind=connection) as ssn:
        yield ssn
