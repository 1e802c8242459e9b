"""
web.settings
~~~~~~~~~~~~
Immutable client configuration, read once from the environment via
python-decouple and injected into the services.
"""
from __future__ import annotations

from dataclasses import dataclass

from decouple import config


@dataclass(frozen=True)
class ServiceUrls:
    """
    Base URLs of the services the web client talks to.

    Attributes:
        villa_api: Root URL of the Villa API, without a trailing slash
            (``SERVICE_URLS_VILLA_API``).
        timeout: Per-request timeout in seconds (``VILLA_CLIENT_TIMEOUT``).
    """

    villa_api: str
    timeout: float = 30.0

    def __post_init__(self) -> None:
        # frozen, so bypass __setattr__
        object.__setattr__(self, "villa_api", self.villa_api.rstrip("/"))

    @classmethod
    def from_env(cls) -> ServiceUrls:
        return cls(
            villa_api=config("SERVICE_URLS_VILLA_API", default="http://localhost:8000"),
            timeout=config("VILLA_CLIENT_TIMEOUT", default=30.0, cast=float),
        )
