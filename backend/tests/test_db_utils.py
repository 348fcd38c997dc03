from sqlalchemy import create_engine, inspect
from sqlalchemy.pool import StaticPool

from app.db_utils import create_tables, seed_categories


def test_create_tables_builds_full_schema():
    engine = create_engine('sqlite:///:memory:', poolclass=StaticPool)
    create_tables(engine)

    tables = set(inspect(engine).get_table_names())
    assert {
        'users',
        'artist_profiles',
        'artist_profile_categories',
        'categories',
        'bookings',
        'reviews',
        'services',
        'availability_windows',
        'slot_locks',
        'artist_settings',
        'blackout_dates',
    } <= tables

    # second run leaves existing tables alone
    create_tables(engine)
    assert seed_categories(engine) == 8
    assert seed_categories(engine) == 0
