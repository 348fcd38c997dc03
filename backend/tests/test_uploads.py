import base64

import pytest

from app.models import ArtistProfile, User, UserType
from app.utils import storage
from app.utils.storage import StoredObject

from helpers import client_as, make_profile, make_user

PNG = base64.b64encode(b'\x89PNG\r\n\x1a\nfake').decode()


@pytest.fixture
def stored(monkeypatch):
    """Capture uploads instead of talking to the bucket."""
    calls = []

    def fake_put(key, data, content_type):
        calls.append((key, data, content_type))
        return StoredObject(key=key, url=f'https://media.test/{key}')

    monkeypatch.setattr('app.utils.storage.storage_put', fake_put)
    return calls


def test_upload_profile_photo(db, stored):
    user = make_user(db, 'open-1')
    resp = client_as(user).post(
        '/api/v1/users/me/profile-photo',
        json={'image_data': f'data:image/png;base64,{PNG}', 'mime_type': 'image/png'},
    )
    assert resp.status_code == 200
    url = resp.json()['url']
    key, data, content_type = stored[0]
    assert key.startswith(f'profile-photos/{user.id}-') and key.endswith('.png')
    assert data.startswith(b'\x89PNG')
    assert content_type == 'image/png'
    assert url == f'https://media.test/{key}'

    db.expire_all()
    saved = db.get(User, user.id)
    assert saved.profile_photo_url == url
    assert saved.profile_photo_key == key


def test_delete_profile_photo(db):
    user = make_user(db, 'open-1', profile_photo_url='https://media.test/a.png', profile_photo_key='a.png')
    client = client_as(user)

    resp = client.delete('/api/v1/users/me/profile-photo')
    assert resp.json()['success'] is True
    db.expire_all()
    assert db.get(User, user.id).profile_photo_url is None

    resp = client.delete('/api/v1/users/me/profile-photo')
    assert resp.json() == {'success': False, 'message': 'No profile photo to delete'}


def test_invalid_base64_is_rejected(db, stored):
    user = make_user(db, 'open-1')
    resp = client_as(user).post(
        '/api/v1/users/me/profile-photo',
        json={'image_data': 'not base64!!', 'mime_type': 'image/png'},
    )
    assert resp.status_code == 400
    assert stored == []


def test_non_image_mime_type_is_rejected(db, stored):
    user = make_user(db, 'open-1')
    resp = client_as(user).post(
        '/api/v1/users/me/profile-photo',
        json={'image_data': PNG, 'mime_type': 'application/pdf'},
    )
    assert resp.status_code == 422


def test_oversized_image_is_rejected(db, stored, monkeypatch):
    monkeypatch.setattr('app.utils.storage.settings.MAX_IMAGE_BYTES', 4)
    user = make_user(db, 'open-1')
    resp = client_as(user).post(
        '/api/v1/users/me/profile-photo', json={'image_data': PNG, 'mime_type': 'image/png'}
    )
    assert resp.status_code == 400


def test_unconfigured_storage_returns_503(db, monkeypatch):
    monkeypatch.setattr('app.utils.storage.settings.STORAGE_BUCKET', '')
    user = make_user(db, 'open-1')
    resp = client_as(user).post(
        '/api/v1/users/me/profile-photo', json={'image_data': PNG, 'mime_type': 'image/png'}
    )
    assert resp.status_code == 503


def test_portfolio_add_and_remove(db, stored):
    user = make_user(db, 'artist-1', UserType.ARTIST)
    profile = make_profile(db, user)
    client = client_as(user)

    first = client.post('/api/v1/portfolio/images', json={'image_data': PNG, 'mime_type': 'image/jpeg'})
    second = client.post('/api/v1/portfolio/images', json={'image_data': PNG, 'mime_type': 'image/webp'})
    assert first.status_code == 201
    assert stored[0][0].startswith(f'portfolio/{profile.id}-')
    url1, url2 = first.json()['url'], second.json()['url']
    assert second.json()['images'] == [url1, url2]

    resp = client.request('DELETE', '/api/v1/portfolio/images', json={'image_url': url1})
    assert resp.status_code == 200
    assert resp.json()['images'] == [url2]

    db.expire_all()
    assert db.get(ArtistProfile, profile.id).portfolio_images == [url2]


def test_portfolio_requires_profile(db, stored):
    user = make_user(db, 'client-1')
    resp = client_as(user).post('/api/v1/portfolio/images', json={'image_data': PNG, 'mime_type': 'image/png'})
    assert resp.status_code == 404
    assert resp.json()['detail']['message'] == 'Artist profile not found'
    assert stored == []


def test_build_key_and_decode():
    assert storage.build_key('/portfolio/', 7, 'image/JPEG', now_ms=123) == 'portfolio/7-123.jpeg'
    assert storage.decode_image_data(f'data:image/gif;base64,{PNG}').startswith(b'\x89PNG')
    with pytest.raises(storage.InvalidImageData):
        storage.decode_image_data('%%%')


def test_public_base_url_falls_back_to_endpoint(monkeypatch):
    monkeypatch.setattr('app.utils.storage.settings.STORAGE_PUBLIC_BASE_URL', '')
    monkeypatch.setattr('app.utils.storage.settings.STORAGE_ENDPOINT', 'https://s3.test/')
    monkeypatch.setattr('app.utils.storage.settings.STORAGE_BUCKET', 'media')
    assert storage.StorageConfig().public_base_url == 'https://s3.test/media'
