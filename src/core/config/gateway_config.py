"""
API gateway provider configuration.
"""

from dataclasses import dataclass


@dataclass
class GatewayConfig:
    """Connection settings for the AWS API Gateway client."""

    region: str = "us-east-1"
    profile: str | None = None
    access_key_id: str | None = None
    secret_access_key: str | None = None
    # Alternate endpoint, e.g. a local emulator
    endpoint_url: str | None = None
    options_status_code: str = "200"

    @property
    def has_explicit_credentials(self) -> bool:
        return bool(self.access_key_id and self.secret_access_key)
