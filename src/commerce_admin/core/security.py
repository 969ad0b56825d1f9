# src/commerce_admin/core/security.py
import secrets

from fastapi import Depends

from commerce_admin.core.config import Settings, get_settings


class PasswordChecker:
    """
    Hardcoded password check for the admin console login.
    There are no sessions or tokens: a successful check only tells the
    front-end which user to display.
    """

    def __init__(self, expected_password: str) -> None:
        self._expected = expected_password

    def verify(self, password: str) -> bool:
        return secrets.compare_digest(password.encode("utf-8"), self._expected.encode("utf-8"))


def get_password_checker(settings: Settings = Depends(get_settings)) -> PasswordChecker:
    return PasswordChecker(expected_password=settings.admin_password)
