import pytest

from quizmaster.exceptions.base import AppError
from quizmaster.exceptions.user import (
    InvalidAdminCode,
    InvalidUsername,
    UserError,
    UsernameTaken,
    UserNotFound,
)


@pytest.mark.parametrize(
    "err",
    [UserNotFound("alice"), UsernameTaken("alice"), InvalidUsername(), InvalidAdminCode()],
)
def test_user_errors_are_app_errors(err):
    assert isinstance(err, UserError)
    assert isinstance(err, AppError)


def test_user_not_found_and_taken_store_username():
    assert UserNotFound("alice").username == "alice"
    assert "alice" in str(UsernameTaken("alice"))
    assert UsernameTaken("alice").key == "errorUsernameTaken"


def test_invalid_admin_code_never_repeats_the_code():
    err = InvalidAdminCode()

    assert err.key == "statsAdminFailure"
    assert str(err) == "Code administrateur invalide."
