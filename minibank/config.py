"""Settings for MiniBank, read from ``MINIBANK_*`` environment variables or ``.env``."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BankSettings(BaseSettings):
    """Runtime settings for the ledger and the console front end.

    Attributes:
        account_prefix (str): Prefix of generated account numbers (``ACC`` -> ``ACC-1001``)
        account_number_base (int): Sequence offset; the first account gets base + 1
        currency_symbol (str): Symbol used in log details and console output
        timestamp_format (str): ``strftime`` format for displayed times
        seed_demo_accounts (bool): Whether the console seeds the three demo accounts
        log_level (str): Level for the ``minibank`` logger
        log_format (str): ``text`` or ``json``
    """

    account_prefix: str = Field(default="ACC", min_length=1)
    account_number_base: int = Field(default=1000, ge=0)
    currency_symbol: str = "₹"
    timestamp_format: str = "%d/%m/%Y, %H:%M:%S"
    seed_demo_accounts: bool = True
    log_level: str = "WARNING"
    log_format: str = "text"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="MINIBANK_",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> BankSettings:
    return BankSettings()
