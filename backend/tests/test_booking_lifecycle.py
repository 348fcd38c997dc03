from app.models import BookingStatus, UserType

from helpers import client_as, make_booking, make_profile, make_user


def _booking_payload(profile_id, **extra):
    payload = {
        'artist_id': profile_id,
        'service_description': 'Wedding portrait',
        'requested_date': '2030-06-01T15:00:00',
        'budget': 5000,
    }
    payload.update(extra)
    return payload


def test_create_booking_starts_pending(db):
    artist_user = make_user(db, 'artist-1', UserType.ARTIST)
    profile = make_profile(db, artist_user, 'Ada')
    client_user = make_user(db, 'client-1')

    client = client_as(client_user)
    resp = client.post('/api/v1/bookings/', json=_booking_payload(profile.id, notes='Outdoor'))
    assert resp.status_code == 201
    data = resp.json()
    assert data['status'] == 'pending'
    assert data['client_id'] == client_user.id
    assert data['artist_id'] == profile.id
    assert data['budget'] == 5000
    assert data['notes'] == 'Outdoor'


def test_create_booking_ignores_client_supplied_status(db):
    profile = make_profile(db, make_user(db, 'artist-1', UserType.ARTIST))
    client_user = make_user(db, 'client-1')

    client = client_as(client_user)
    resp = client.post(
        '/api/v1/bookings/',
        json=_booking_payload(profile.id, status='completed', client_id=999),
    )
    assert resp.status_code == 201
    assert resp.json()['status'] == 'pending'
    assert resp.json()['client_id'] == client_user.id


def test_create_booking_unknown_artist_returns_404(db):
    client = client_as(make_user(db, 'client-1'))
    resp = client.post('/api/v1/bookings/', json=_booking_payload(12345))
    assert resp.status_code == 404
    assert resp.json()['detail']['message'] == 'Artist not found'


def test_create_booking_rejects_non_positive_budget(db):
    profile = make_profile(db, make_user(db, 'artist-1', UserType.ARTIST))
    client = client_as(make_user(db, 'client-1'))
    resp = client.post('/api/v1/bookings/', json=_booking_payload(profile.id, budget=0))
    assert resp.status_code == 422


def test_create_booking_requires_authentication(db):
    profile = make_profile(db, make_user(db, 'artist-1', UserType.ARTIST))
    client = client_as(None)
    resp = client.post('/api/v1/bookings/', json=_booking_payload(profile.id))
    assert resp.status_code == 401


def test_artist_accepts_then_client_completes(db):
    artist_user = make_user(db, 'artist-1', UserType.ARTIST)
    profile = make_profile(db, artist_user)
    client_user = make_user(db, 'client-1')
    booking = make_booking(db, client_user, profile)

    resp = client_as(artist_user).patch(
        f'/api/v1/bookings/{booking.id}/status', json={'status': 'accepted'}
    )
    assert resp.status_code == 200
    assert resp.json()['status'] == 'accepted'

    resp = client_as(client_user).patch(
        f'/api/v1/bookings/{booking.id}/status', json={'status': 'completed'}
    )
    assert resp.status_code == 200
    assert resp.json()['status'] == 'completed'

    db.expire_all()
    assert db.get(type(booking), booking.id).status == BookingStatus.COMPLETED


def test_client_completes_pending_booking_directly(db):
    profile = make_profile(db, make_user(db, 'artist-1', UserType.ARTIST))
    client_user = make_user(db, 'client-1')
    booking = make_booking(db, client_user, profile)

    resp = client_as(client_user).patch(
        f'/api/v1/bookings/{booking.id}/status', json={'status': 'completed'}
    )
    assert resp.status_code == 200
    assert resp.json()['status'] == 'completed'


def test_any_status_may_move_to_any_target(db):
    artist_user = make_user(db, 'artist-1', UserType.ARTIST)
    profile = make_profile(db, artist_user)
    booking = make_booking(db, make_user(db, 'client-1'), profile, status=BookingStatus.COMPLETED)

    resp = client_as(artist_user).patch(
        f'/api/v1/bookings/{booking.id}/status', json={'status': 'cancelled'}
    )
    assert resp.status_code == 200
    assert resp.json()['status'] == 'cancelled'


def test_stranger_cannot_update_status(db):
    profile = make_profile(db, make_user(db, 'artist-1', UserType.ARTIST))
    booking = make_booking(db, make_user(db, 'client-1'), profile)
    other_artist = make_user(db, 'artist-2', UserType.ARTIST)
    make_profile(db, other_artist, 'Other')

    resp = client_as(other_artist).patch(
        f'/api/v1/bookings/{booking.id}/status', json={'status': 'declined'}
    )
    assert resp.status_code == 403
    assert resp.json()['detail']['message'] == 'Not authorized to update this booking'

    db.expire_all()
    assert db.get(type(booking), booking.id).status == BookingStatus.PENDING


def test_update_missing_booking_returns_404(db):
    client = client_as(make_user(db, 'client-1'))
    resp = client.patch('/api/v1/bookings/999/status', json={'status': 'accepted'})
    assert resp.status_code == 404


def test_pending_is_not_an_update_target(db):
    profile = make_profile(db, make_user(db, 'artist-1', UserType.ARTIST))
    client_user = make_user(db, 'client-1')
    booking = make_booking(db, client_user, profile, status=BookingStatus.ACCEPTED)

    resp = client_as(client_user).patch(
        f'/api/v1/bookings/{booking.id}/status', json={'status': 'pending'}
    )
    assert resp.status_code == 422

    resp = client_as(client_user).patch(
        f'/api/v1/bookings/{booking.id}/status', json={'status': 'archived'}
    )
    assert resp.status_code == 422
