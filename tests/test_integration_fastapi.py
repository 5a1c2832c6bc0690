import pytest
from fastapi import FastAPI
from fastapi import Depends
from fastapi.testclient import TestClient

from relaypager import exc
from relaypager import Connection, ConnectionArguments, SequenceLoader
from relaypager.integration.fastapi import connection_arguments

from .util.models import Item, items


ITEMS = items(1, 2, 3, 4, 5)


@pytest.mark.parametrize(('uri_params', 'expected_arguments'), [
    ('', dict(first=None, after=None, last=None, before=None)),
    ('?first=10', dict(first=10, after=None, last=None, before=None)),
    ('?first=10&after=abc', dict(first=10, after='abc', last=None, before=None)),
    ('?last=2&before=5', dict(first=None, after=None, last=2, before='5')),
])
def test_connection_arguments(app: FastAPI, client: TestClient, uri_params: str, expected_arguments: dict):
    """ FastAPI: get pagination arguments as URL parameters """
    @app.get('/api')
    def api(args: ConnectionArguments = Depends(connection_arguments)):
        return {'args': args.export()}

    res = client.request('GET', f'/api{uri_params}')
    assert res.json() == {'args': expected_arguments}


def test_connection_endpoint(app: FastAPI, client: TestClient):
    """ FastAPI: paginated endpoint """
    @app.get('/api/items')
    def api(args: ConnectionArguments = Depends(connection_arguments)):
        connection = Connection.new(Item, **args.export(), load=SequenceLoader(ITEMS))
        return connection.export()

    res = client.request('GET', '/api/items?first=2&after=1')
    assert res.json() == {
        'edges': [
            {'node': {'id': 2, 'title': 'item-2'}, 'cursor': '2'},
            {'node': {'id': 3, 'title': 'item-3'}, 'cursor': '3'},
        ],
        'pageInfo': {'hasPreviousPage': False, 'hasNextPage': True, 'startCursor': '2', 'endCursor': '3'},
    }

    # Invalid arguments: errors are raised as they are
    with pytest.raises(exc.PaginationArgumentError):
        client.request('GET', '/api/items?first=-1')


@pytest.fixture()
def app() -> FastAPI:
    return FastAPI()


@pytest.fixture()
def client(app: FastAPI) -> TestClient:
    with TestClient(app) as c:
        yield c
