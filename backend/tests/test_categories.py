from app.crud import crud_category
from app.db_utils import DEFAULT_CATEGORIES, seed_categories
from app.models import Category

from helpers import client_as


def test_seed_is_idempotent(engine, db):
    assert db.query(Category).count() == len(DEFAULT_CATEGORIES)
    assert seed_categories(engine) == 0
    assert db.query(Category).count() == len(DEFAULT_CATEGORIES)


def test_seed_restores_missing_slug(engine, db):
    db.query(Category).filter(Category.slug == 'photography').delete()
    db.commit()

    assert seed_categories(engine) == 1
    assert db.query(Category).filter(Category.slug == 'photography').count() == 1


def test_list_categories_sorted_by_name_with_cache_header(Session):
    resp = client_as(None).get('/api/v1/categories/')
    assert resp.status_code == 200
    assert resp.headers['cache-control'] == 'public, max-age=3600'
    names = [c['name'] for c in resp.json()]
    assert names == sorted(c['name'] for c in DEFAULT_CATEGORIES)


def test_category_lookup_by_slug(db):
    category = crud_category.get_category_by_slug(db, 'writing-poetry')
    assert category is not None
    assert category.name == 'Writing & Poetry'
    assert crud_category.get_category_by_slug(db, 'no-such-slug') is None
