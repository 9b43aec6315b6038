"""Configuration management for the Wiiload client."""

from dataclasses import dataclass
from typing import Optional
import os
from pathlib import Path

from dotenv import load_dotenv

from utils.exceptions import ConfigurationError


# Load .env file from project root
# Real environment variables always take precedence over the file
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(dotenv_path=env_path, override=False)

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class WiiloadConfig:
    """Settings for sending payloads to a console."""

    address: Optional[str] = None
    timeout: Optional[float] = None
    log_level: str = "INFO"

    def validate(self) -> None:
        """Validate client configuration parameters."""
        if self.timeout is not None and self.timeout <= 0:
            raise ConfigurationError(
                f"Timeout must be a positive number of seconds, got: {self.timeout}"
            )
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigurationError(
                f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got: {self.log_level}"
            )


class Config:
    """Main configuration loader."""

    def __init__(self):
        self.wiiload: Optional[WiiloadConfig] = None

    def load_wiiload_config(self) -> WiiloadConfig:
        """
        Load client configuration from environment variables.

        Environment variables:
            WII: Fallback console IPv4 address (default: unset)
            WIILOAD_TIMEOUT: Connect/write timeout in seconds (default: unset,
                the network stack's own default applies)
            LOG_LEVEL: Logging level (default: INFO)

        The address itself is checked by the address resolver, so an
        empty WII is not an error here.

        Returns:
            Validated WiiloadConfig instance

        Raises:
            ConfigurationError: If a value is malformed
        """
        timeout_str = os.getenv('WIILOAD_TIMEOUT')
        timeout = None
        if timeout_str:
            try:
                timeout = float(timeout_str)
            except ValueError:
                raise ConfigurationError(
                    f"WIILOAD_TIMEOUT must be a number, got: {timeout_str}"
                )

        config = WiiloadConfig(
            address=os.getenv('WII') or None,
            timeout=timeout,
            log_level=os.getenv('LOG_LEVEL', 'INFO'),
        )
        config.validate()
        self.wiiload = config
        return config
