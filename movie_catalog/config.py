"""
Connection configuration loaded from environment or defaults.

The core never reads the environment itself; bootstrapping code resolves a
``ConnectionSettings`` here and passes it in explicitly.
"""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, SecretStr, field_validator


# Default database location
DEFAULT_DB_PATH = "data/movies.db"
DEFAULT_DATABASE_URL = f"sqlite:///{DEFAULT_DB_PATH}"


class ConnectionSettings(BaseModel):
    """
    Where and as whom to connect.

    Attributes:
        location: SQLAlchemy URL or SQLite file path
        username: Database user (optional, unused by SQLite)
        password: Database password (optional, unused by SQLite)
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    location: str = DEFAULT_DATABASE_URL
    username: Optional[str] = None
    password: Optional[SecretStr] = None

    @field_validator('username', mode='before')
    @classmethod
    def _blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ConnectionSettings":
        """
        Build settings from ``DATABASE_URL``, ``DB_USER`` and ``DB_PASS``.

        Blank variables fall back to the defaults.
        """
        env = os.environ if environ is None else environ
        return cls(
            location=env.get("DATABASE_URL", "").strip() or DEFAULT_DATABASE_URL,
            username=env.get("DB_USER") or None,
            password=env.get("DB_PASS") or None,
        )

    def with_overrides(
        self,
        location: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None
    ) -> "ConnectionSettings":
        """Copy of these settings with any non-empty argument replacing its field."""
        data = self.model_dump()
        if location:
            data['location'] = location
        if username:
            data['username'] = username
        if password:
            data['password'] = password
        return ConnectionSettings(**data)

    def password_value(self) -> Optional[str]:
        """Plain-text password for handing to the driver."""
        return self.password.get_secret_value() if self.password else None


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()
