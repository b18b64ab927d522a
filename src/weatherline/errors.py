"""
Error taxonomy.

- ``TransportError``: network/TLS failure, raised by ``requests`` and never
  wrapped or retried.
- ``DecodeError``: a response body that should have been well-formed JSON of
  a known shape was not.
- ``ForecastError`` / ``NotifyError``: the remote provider rejected the
  request. They are deliberately separate classes with their own fields;
  catch both with ``except PROVIDER_ERRORS``.
- ``UsageError``: bad command-line input or missing settings.
"""

from __future__ import annotations

import requests

TransportError = requests.RequestException


class DecodeError(ValueError):
    """Malformed JSON where a well-formed value was required."""


class UsageError(Exception):
    """Invalid command-line arguments or configuration."""


class ForecastError(Exception):
    """Forecast API returned an error (``{"code": int, "error": str}``)."""

    def __init__(self, code: int, message: str) -> None:
        super().__init__(f"{code}: {message}")
        self.code = code
        self.message = message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ForecastError):
            return NotImplemented
        return (self.code, self.message) == (other.code, other.message)

    def __hash__(self) -> int:
        return hash((ForecastError, self.code, self.message))


class NotifyError(Exception):
    """LINE Notify returned an error (``{"status": int, "message": str}``)."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(f"{status}: {message}")
        self.status = status
        self.message = message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NotifyError):
            return NotImplemented
        return (self.status, self.message) == (other.status, other.message)

    def __hash__(self) -> int:
        return hash((NotifyError, self.status, self.message))


ProviderRejected = ForecastError | NotifyError

#: For ``except`` clauses, which take a tuple rather than a union.
PROVIDER_ERRORS: tuple[type[Exception], ...] = (ForecastError, NotifyError)


class MissingSettingsError(UsageError):
    """One or more required settings are empty."""

    def __init__(self, names: list[str]) -> None:
        quoted = ",".join(f'"{n}"' for n in names)
        super().__init__(f"required flag(s) [{quoted}] not set")
        self.names = names
