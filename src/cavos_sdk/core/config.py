"""Configuration management for Cavos SDK."""

import os
from dataclasses import dataclass
from typing import Optional

from .exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://services.cavos.xyz/api/v1/external"


@dataclass(frozen=True)
class CavosConfig:
    """Configuration for Cavos SDK."""
    base_url: str = DEFAULT_BASE_URL
    auth0_domain: Optional[str] = None
    auth0_client_id: Optional[str] = None
    auth0_client_secret: Optional[str] = None
    auth0_m2m_client_id: Optional[str] = None
    auth0_m2m_client_secret: Optional[str] = None
    supabase_url: Optional[str] = None
    supabase_anon_key: Optional[str] = None
    request_timeout: float = 30.0

    @classmethod
    def from_env(cls) -> 'CavosConfig':
        """Load configuration from environment variables."""
        return cls(
            base_url=os.environ.get('CAVOS_BASE_URL', DEFAULT_BASE_URL),
            auth0_domain=os.environ.get('AUTH0_DOMAIN'),
            auth0_client_id=os.environ.get('AUTH0_CLIENT_ID'),
            auth0_client_secret=os.environ.get('AUTH0_CLIENT_SECRET'),
            auth0_m2m_client_id=os.environ.get('AUTH0_M2M_CLIENT_ID'),
            auth0_m2m_client_secret=os.environ.get('AUTH0_M2M_CLIENT_SECRET'),
            supabase_url=os.environ.get('SUPABASE_URL'),
            supabase_anon_key=os.environ.get('SUPABASE_ANON_KEY'),
            request_timeout=float(os.environ.get('REQUEST_TIMEOUT', '30.0'))
        )

    @property
    def auth0_base_url(self) -> str:
        """``https://<domain>`` for the configured Auth0 tenant."""
        return f"https://{self.require('auth0_domain')}"

    def require(self, *names: str) -> str:
        """Return the first named setting, raising if any of them is unset.

        Args:
            names: Attribute names that must all be configured

        Returns:
            Value of the first attribute

        Raises:
            ConfigurationError: A required setting is missing
        """
        missing = [name for name in names if not getattr(self, name)]
        if missing:
            raise ConfigurationError(
                f"Missing configuration: {', '.join(n.upper() for n in missing)}",
                details={'missing': missing}
            )
        return getattr(self, names[0])
