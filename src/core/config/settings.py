"""
Main configuration class that composes all configs.
"""

import os

from dotenv import load_dotenv

from src.core.config.gateway_config import GatewayConfig
from src.core.config.logging_config import LoggingConfig

# Load environment variables from a .env file
load_dotenv()


class Config:
    """Main configuration class."""

    def __init__(self) -> None:
        self.gateway = GatewayConfig(
            region=os.getenv("AWS_REGION") or os.getenv("AWS_DEFAULT_REGION") or "us-east-1",
            profile=os.getenv("AWS_PROFILE"),
            access_key_id=os.getenv("AWS_ACCESS_KEY_ID"),
            secret_access_key=os.getenv("AWS_SECRET_ACCESS_KEY"),
            endpoint_url=os.getenv("APIGATEWAY_ENDPOINT_URL"),
            options_status_code=os.getenv("CORS_OPTIONS_STATUS_CODE", "200"),
        )

        self.logging = LoggingConfig(
            level=os.getenv("LOG_LEVEL", "INFO"),
            format=os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
            file_path=os.getenv("LOG_FILE_PATH"),
            json=os.getenv("LOG_JSON", "false").lower() == "true",
        )

        # Development settings
        self.debug = os.getenv("DEBUG", "false").lower() == "true"
        self.environment = os.getenv("ENVIRONMENT", "development")

    def validate(self) -> bool:
        """Validate configuration."""
        errors = []

        if bool(self.gateway.access_key_id) != bool(self.gateway.secret_access_key):
            errors.append("AWS_ACCESS_KEY_ID and AWS_SECRET_ACCESS_KEY must be set together")

        if not self.gateway.region:
            errors.append("AWS_REGION is required")

        status_code = self.gateway.options_status_code
        if not (status_code.isdigit() and len(status_code) == 3):
            errors.append("CORS_OPTIONS_STATUS_CODE must be a three digit HTTP status code")

        if self.logging.level.upper() not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            errors.append(f"LOG_LEVEL '{self.logging.level}' is not a valid logging level")

        if errors:
            raise ValueError(f"Configuration errors: {', '.join(errors)}")

        return True


# Global config instance
config = Config()
