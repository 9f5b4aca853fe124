"""
Hiero Configuration

Settings for the token facade, loaded from environment variables or a .env
file. Variables use the ``HIERO_`` prefix, e.g. ``HIERO_OPERATOR_ACCOUNT_ID``.
"""

import logging

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from .data import Account


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class HieroSettings(BaseSettings):
    """
    Operator account and runtime settings

    The operator account pays for every transaction and is the default
    treasury, supply key holder and sender of the token facade.
    """

    # ============================================================================
    # Operator (required)
    # ============================================================================

    operator_account_id: str  # e.g. "0.0.1234"
    operator_private_key: SecretStr  # DER or raw hex, never printed

    # ============================================================================
    # Network / Runtime
    # ============================================================================

    network_name: str | None = None  # mainnet, testnet, previewnet or a custom name
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="HIERO_", env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    def get_operator_account(self) -> Account:
        """
        Parse the configured operator account

        Raises:
            ParseError: If the account id or private key is malformed
        """
        return Account.of(self.operator_account_id, self.operator_private_key.get_secret_value())


def configure_logging(settings: HieroSettings) -> None:
    """Configure root logging with the level from the settings"""
    level = getattr(logging, settings.log_level.upper(), None)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {settings.log_level}")

    logging.basicConfig(level=level, format=LOG_FORMAT)
