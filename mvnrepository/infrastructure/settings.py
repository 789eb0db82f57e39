"""Client configuration read from environment variables."""
import os
from dataclasses import dataclass
from dotenv import load_dotenv


DEFAULT_BASE_URL = "https://mvnrepository.com/"
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_USER_AGENT = "mvnrepository-client/0.1.0"


@dataclass(frozen=True)
class Settings:
    """Connection settings for the mvnrepository client."""
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the environment.

        Loads ``.env`` (or ``env``) first; variables already set in the
        process environment win.

        Raises:
            ValueError: When MVNREPOSITORY_TIMEOUT is not a number
        """
        # Load environment variables from .env or env file
        load_dotenv('.env') or load_dotenv('env')

        raw_timeout = os.getenv("MVNREPOSITORY_TIMEOUT", str(DEFAULT_TIMEOUT_SECONDS))
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ValueError(f"MVNREPOSITORY_TIMEOUT must be a number of seconds, got: {raw_timeout!r}")

        return cls(
            base_url=os.getenv("MVNREPOSITORY_BASE_URL", DEFAULT_BASE_URL),
            timeout_seconds=timeout,
            user_agent=os.getenv("MVNREPOSITORY_USER_AGENT", DEFAULT_USER_AGENT)
        )
