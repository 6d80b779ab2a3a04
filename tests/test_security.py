from datetime import timedelta

from app.core.security import create_session_token, decode_session_token, session_max_age


def test_round_trip_user_id():
    assert decode_session_token(create_session_token(42)) == 42


def test_lifetime_is_thirty_days():
    assert session_max_age() == timedelta(days=30)


def test_garbage_token():
    assert decode_session_token("not-a-token") is None


def test_expired_token():
    token = create_session_token(7, expires_delta=timedelta(seconds=-5))
    assert decode_session_token(token) is None
