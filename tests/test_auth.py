import pytest
from sqlmodel import select

from kitchen import auth, errors
from kitchen.models import AdminAccount


@pytest.fixture
def admin(session):
    auth.ensure_admin_account(session, "admin", "admin123")


def test_admin_account_is_seeded_once(session, admin):
    auth.ensure_admin_account(session, "other", "secret")
    usernames = [account.username for account in session.exec(select(AdminAccount))]
    assert usernames == ["admin"]


def test_valid_credentials_return_token(session, admin):
    assert auth.authenticate(session, "admin", "admin123", "tok") == "tok"


@pytest.mark.parametrize(
    "username, secret",
    [("admin", "wrong"), ("nobody", "admin123"), ("admin", ""), ("admin", "ädmin123")],
)
def test_bad_credentials_are_rejected(session, admin, username, secret):
    with pytest.raises(errors.UnauthorizedError):
        auth.authenticate(session, username, secret, "tok")
