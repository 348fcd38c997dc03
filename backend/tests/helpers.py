from datetime import datetime

from fastapi.testclient import TestClient

from app.main import app
from app.models import ArtistProfile, Booking, BookingStatus, Category, User, UserType
from app.api.auth import get_current_user


def make_user(db, open_id, user_type=UserType.CLIENT, **kwargs):
    user = User(open_id=open_id, name=kwargs.pop('name', open_id), user_type=user_type, **kwargs)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def make_profile(db, user, display_name='Artist', category_slugs=(), **kwargs):
    profile = ArtistProfile(user_id=user.id, display_name=display_name, **kwargs)
    if category_slugs:
        profile.categories = db.query(Category).filter(Category.slug.in_(category_slugs)).all()
    db.add(profile)
    db.commit()
    db.refresh(profile)
    return profile


def make_booking(db, client, profile, status=BookingStatus.PENDING, **kwargs):
    booking = Booking(
        client_id=client.id,
        artist_id=profile.id,
        service_description=kwargs.pop('service_description', 'Portrait'),
        requested_date=kwargs.pop('requested_date', datetime(2030, 1, 1, 18, 0)),
        status=status,
        **kwargs,
    )
    db.add(booking)
    db.commit()
    db.refresh(booking)
    return booking


def client_as(user):
    """TestClient whose requests are authenticated as ``user``."""
    if user is None:
        app.dependency_overrides.pop(get_current_user, None)
    else:
        app.dependency_overrides[get_current_user] = lambda: user
    return TestClient(app)
