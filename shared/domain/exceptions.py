"""Domain exceptions."""

from shared.domain.consts import ErrorMessages


class VaultError(Exception):
    """Base class for password vault errors."""


class PasswordNotFoundError(VaultError, LookupError):
    """Raised when a write targets a password record that does not exist."""

    def __init__(self, password_id: int) -> None:
        super().__init__(ErrorMessages.PASSWORD_NOT_FOUND.format(password_id=password_id))
        self.password_id = password_id
