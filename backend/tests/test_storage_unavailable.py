from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.database import get_db, get_engine, reset_engine
from app.api.auth import get_current_user
from app.models import Booking, BookingStatus, User, UserType
from app.schemas import BookingCreate, ReviewCreate, UserIdentity
from app.utils.errors import StorageUnavailableError
from app import crud


@pytest.fixture
def no_database(monkeypatch):
    monkeypatch.setenv('DATABASE_URL', '')
    monkeypatch.setattr('app.database.settings.DATABASE_URL', '')
    reset_engine()
    yield
    reset_engine()
    app.dependency_overrides.clear()


def test_get_db_yields_none(no_database):
    assert get_engine() is None
    gen = get_db()
    assert next(gen) is None


def test_reads_degrade_to_empty(no_database, caplog):
    assert crud.user.get_user(None, 1) is None
    assert crud.user.get_user_by_open_id(None, 'x') is None
    assert crud.artist_profile.get_profile(None, 1) is None
    assert crud.artist_profile.search_profiles(None, category=1) == []
    assert crud.artist_profile.get_all_profiles(None) == []
    assert crud.booking.get_booking(None, 1) is None
    assert crud.booking.get_bookings_by_client(None, 1) == []
    assert crud.booking.get_bookings_by_artist(None, 1) == []
    assert crud.review.get_reviews_by_artist(None, 1) == []
    assert crud.review.get_artist_average_rating(None, 1) is None
    assert crud.crud_category.get_categories(None) == []
    assert any('database not available' in r.getMessage() for r in caplog.records)


def test_writes_raise(no_database):
    booking_in = BookingCreate(
        artist_id=1, service_description='Mural', requested_date=datetime(2030, 1, 1)
    )
    with pytest.raises(StorageUnavailableError):
        crud.booking.create_booking(None, booking_in, client_id=1)
    with pytest.raises(StorageUnavailableError):
        crud.user.upsert_user(None, UserIdentity(open_id='x'))

    booking = Booking(id=1, client_id=1, artist_id=1, status=BookingStatus.COMPLETED)
    with pytest.raises(StorageUnavailableError) as exc:
        crud.booking.update_booking_status(None, booking, BookingStatus.ACCEPTED)
    assert exc.value.operation == 'update booking status'
    with pytest.raises(StorageUnavailableError):
        crud.review.create_review(None, booking, ReviewCreate(booking_id=1, rating=5))


def test_public_endpoints_return_empty(no_database):
    client = TestClient(app)
    assert client.get('/api/v1/categories/').json() == []
    assert client.get('/api/v1/artists/search').json() == []
    assert client.get('/api/v1/artists/').json() == []
    assert client.get('/auth/me').json() is None
    assert client.get('/healthz').json() == {'status': 'ok', 'database': False}


def test_write_endpoint_returns_503(no_database):
    user = User(id=1, open_id='x', user_type=UserType.CLIENT)
    app.dependency_overrides[get_current_user] = lambda: user

    resp = TestClient(app).post('/api/v1/artists/', json={'display_name': 'Nobody'})
    assert resp.status_code == 503
    assert resp.json()['detail']['message'] == 'Database not available: cannot create artist profile'
