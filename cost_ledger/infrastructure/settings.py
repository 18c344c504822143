"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path

import dotenv
from sqlalchemy.engine import make_url

from cost_ledger.domain.constants import DEFAULT_RATES_URL
from cost_ledger.infrastructure.logging.logger import get_app_logger
from cost_ledger.infrastructure.rate_source import DEFAULT_TIMEOUT_SECONDS
from cost_ledger.utils.utils import get_project_root


@dataclass(frozen=True)
class AppSettings:
    """Settings for the record store and the rate source.

    Attributes:
        database_url: Async SQLAlchemy URL of the record store.
        default_rates_url: Rate source used when no override is stored.
        rates_timeout: Timeout in seconds for rate retrievals.
    """

    database_url: str
    default_rates_url: str = DEFAULT_RATES_URL
    rates_timeout: float = DEFAULT_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls) -> "AppSettings":
        """Build settings from environment variables and a ``.env`` file.

        Returns:
            AppSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        raw_url = os.getenv("COST_LEDGER_DB_URL", "").strip()
        database_url = cls._normalize_database_url(
            raw_url or cls._default_database_url(),
        )
        default_rates_url = (
            os.getenv("COST_LEDGER_DEFAULT_RATES_URL", "").strip()
            or DEFAULT_RATES_URL
        )
        rates_timeout = cls._parse_timeout(
            os.getenv("COST_LEDGER_RATES_TIMEOUT", ""),
            logger=logger,
        )
        return cls(
            database_url=database_url,
            default_rates_url=default_rates_url,
            rates_timeout=rates_timeout,
        )

    @staticmethod
    def _default_database_url() -> str:
        return "sqlite+aiosqlite:///data/costs.db"

    @staticmethod
    def _normalize_database_url(raw_url: str) -> str:
        """Resolve relative SQLite paths against the project root.

        Args:
            raw_url: Raw database URL.

        Returns:
            str: URL with an absolute SQLite path, other URLs unchanged.
        """
        url = make_url(raw_url)
        if not url.drivername.startswith("sqlite") or not url.database:
            return raw_url
        if url.database == ":memory:":
            return raw_url
        path = Path(url.database).expanduser()
        if not path.is_absolute():
            path = get_project_root() / path
        path.parent.mkdir(parents=True, exist_ok=True)
        return url.set(database=str(path)).render_as_string(hide_password=False)

    @staticmethod
    def _parse_timeout(raw_timeout: str, logger) -> float:
        """Parse the rate timeout, falling back to the default on bad input.

        Args:
            raw_timeout: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            float: Positive timeout in seconds.
        """
        if not raw_timeout.strip():
            return DEFAULT_TIMEOUT_SECONDS
        try:
            timeout = float(raw_timeout)
        except ValueError:
            timeout = 0.0
        if timeout <= 0:
            logger.warning(
                f"Invalid COST_LEDGER_RATES_TIMEOUT={raw_timeout!r}; "
                f"using {DEFAULT_TIMEOUT_SECONDS}"
            )
            return DEFAULT_TIMEOUT_SECONDS
        return timeout


__all__ = ["AppSettings"]
