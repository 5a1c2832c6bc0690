import pytest
import sqlalchemy as sa
import sqlalchemy.orm

from relaypager import Connection, PageInfo, IdCursor, KeysetCursor
from relaypager.loaders.sa import SelectLoader
from relaypager.testing import RecordingLoader, LoaderCall

from .util.models import Article, User


@pytest.fixture()
def users(ssn: sa.orm.Session) -> list[User]:
    users = [User(id=id, login=f'user{id}') for id in (1, 2, 3, 4, 5)]
    ssn.add_all(users)
    ssn.flush()
    return users


@pytest.fixture()
def articles(ssn: sa.orm.Session) -> list[Article]:
    # Sorted by (rating, id)
    articles = [
        Article(id=3, rating=1, title='c'),
        Article(id=5, rating=1, title='e'),
        Article(id=1, rating=2, title='a'),
        Article(id=2, rating=3, title='b'),
        Article(id=4, rating=3, title='d'),
    ]
    ssn.add_all(articles)
    ssn.flush()
    return articles


@pytest.mark.parametrize(('after', 'before', 'limit', 'expected_ids'), [
    (None, None, None, [1, 2, 3, 4, 5]),
    (None, None, 3, [1, 2, 3]),
    (IdCursor(2), None, None, [3, 4, 5]),
    (None, IdCursor(3), None, [1, 2]),
    (IdCursor(1), IdCursor(5), 2, [2, 3]),
])
def test_select_loader(ssn: sa.orm.Session, users: list[User], after, before, limit, expected_ids: list[int]):
    """ Test: SELECT loader, single column """
    loader = SelectLoader(ssn, sa.select(User), User.id)
    assert [user.id for user in loader.load(after, before, limit)] == expected_ids


@pytest.mark.parametrize(('after', 'before', 'limit', 'expected_ids'), [
    (None, None, None, [3, 5, 1, 2, 4]),
    (KeysetCursor((1, 5)), None, None, [1, 2, 4]),
    (KeysetCursor((1, 3)), KeysetCursor((3, 4)), None, [5, 1, 2]),
    (KeysetCursor((1, 3)), None, 2, [5, 1]),
])
def test_select_loader_keyset(ssn: sa.orm.Session, articles: list[Article], after, before, limit, expected_ids: list[int]):
    """ Test: SELECT loader, tuple comparison """
    loader = SelectLoader(ssn, sa.select(Article), Article.rating, Article.id)
    assert [article.id for article in loader.load(after, before, limit)] == expected_ids


def test_select_loader_wrong_cursor(ssn: sa.orm.Session, articles: list[Article]):
    """ Test: cursor width must match the columns """
    loader = SelectLoader(ssn, sa.select(Article), Article.rating, Article.id)
    with pytest.raises(ValueError):
        loader.load(KeysetCursor((1,)), None, None)


def test_connection_users(ssn: sa.orm.Session, users: list[User]):
    """ Test: paginate users, page by page """
    loader = RecordingLoader(SelectLoader(ssn, sa.select(User).where(User.id != 3), User.id))

    # Page 1
    page = Connection.new(User, first=2, load=loader)
    assert [user.login for user in page.nodes] == ['user1', 'user2']
    assert page.page_info == PageInfo(has_previous_page=False, has_next_page=True, start_cursor='1', end_cursor='2')
    assert loader[-1] == LoaderCall(after=None, before=None, limit=3)

    # Page 2
    page = Connection.new(User, first=2, after=page.page_info.end_cursor, load=loader)
    assert [user.login for user in page.nodes] == ['user4', 'user5']
    assert page.page_info == PageInfo(has_previous_page=False, has_next_page=False, start_cursor='4', end_cursor='5')

    # Back
    page = Connection.new(User, last=1, before=page.page_info.start_cursor, load=loader)
    assert [user.login for user in page.nodes] == ['user2']
    assert page.page_info == PageInfo(has_previous_page=True, has_next_page=False, start_cursor='2', end_cursor='2')


def test_connection_articles(ssn: sa.orm.Session, articles: list[Article]):
    """ Test: paginate articles with keyset cursors """
    loader = SelectLoader(ssn, sa.select(Article), Article.rating, Article.id)

    # Page 1
    page = Connection.new(Article, first=2, load=loader)
    assert [article.title for article in page.nodes] == ['c', 'e']
    assert page.page_info.has_next_page is True

    # Page 2: follow the opaque cursor
    page = Connection.new(Article, first=2, after=page.page_info.end_cursor, load=loader)
    assert [article.title for article in page.nodes] == ['a', 'b']
    assert page.page_info.end_cursor == KeysetCursor((3, 2)).encode()


def test_select_loader_replaces_ordering(ssn: sa.orm.Session, users: list[User]):
    """ Test: the statement's own ORDER BY does not affect pagination """
    loader = SelectLoader(ssn, sa.select(User).order_by(User.login.desc()), User.id)
    assert [user.id for user in loader.load(IdCursor(2), None, 2)] == [3, 4]

    page = Connection.new(User, last=2, load=loader)
    assert [user.id for user in page.nodes] == [4, 5]
