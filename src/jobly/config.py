import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load the appropriate .env file on module import
env = os.environ.get("JOBLY_ENV", "development").lower()
env_file = f".env.{env}"
if os.path.exists(env_file):
    load_dotenv(env_file)
else:
    # Fall back to the default .env file
    load_dotenv()


@dataclass
class Config:
    environment: str
    database_url: str
    log_level: str

    @classmethod
    def from_env(cls) -> "Config":
        default_db = "jobly_test" if env == "test" else "jobly"
        return cls(
            environment=env,
            database_url=os.environ.get(
                "DATABASE_URL", f"postgresql://localhost:5432/{default_db}"
            ),
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        )


config = Config.from_env()


def configure_logging(level: str = None) -> None:
    """Configure root logging once for the app and the CLI."""
    logging.basicConfig(
        level=level or config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
