from media_cleaner.config import settings
from media_cleaner.services import nonce_service
from media_cleaner.services.auth_service import create_access_token


def test_nonce_roundtrip():
    token = nonce_service.create_nonce("delete_things", 7)
    assert nonce_service.verify_nonce(token, "delete_things", 7) is True


def test_nonce_bound_to_action_and_user():
    token = nonce_service.create_nonce("delete_things", 7)
    assert nonce_service.verify_nonce(token, "other_action", 7) is False
    assert nonce_service.verify_nonce(token, "delete_things", 8) is False


def test_nonce_missing_or_garbage():
    assert nonce_service.verify_nonce(None, "delete_things", 7) is False
    assert nonce_service.verify_nonce("", "delete_things", 7) is False
    assert nonce_service.verify_nonce("garbage", "delete_things", 7) is False


def test_nonce_expired(monkeypatch):
    monkeypatch.setattr(settings, "NONCE_LIFETIME_SECONDS", -60)
    token = nonce_service.create_nonce("delete_things", 7)
    assert nonce_service.verify_nonce(token, "delete_things", 7) is False


def test_nonce_rejects_other_secret(monkeypatch):
    token = nonce_service.create_nonce("delete_things", 7)
    monkeypatch.setattr(settings, "SECRET_KEY", "rotated-secret")
    assert nonce_service.verify_nonce(token, "delete_things", 7) is False


def test_access_token_is_not_a_nonce():
    token = create_access_token(7)
    assert nonce_service.verify_nonce(token, "delete_things", 7) is False
