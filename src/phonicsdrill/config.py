"""Configuration settings for the drill."""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Define base directory
BASE_DIR = Path(__file__).parent.parent.parent

# Load environment variables from .env file
env_file = ".env.test" if os.getenv("ENV") == "test" else ".env"
load_dotenv(env_file)


# Define data directories from environment variables
DATA_DIR = Path(os.getenv("DATA_DIR", "./data"))
CATALOG_FILE = DATA_DIR / os.getenv("CATALOG_FILE", "words.json")

# Mastery settings
MAX_SCORE = 3  # stars per word
DEFAULT_STORAGE_KEY = "phonicsAttempts"


def ensure_directories() -> None:
    """Ensure all required directories exist."""
    directories = [
        DATA_DIR,
    ]

    for directory in directories:
        directory.mkdir(parents=True, exist_ok=True)


@dataclass
class PathSettings:
    """Path configuration settings."""
    base_dir: Path = BASE_DIR
    data_dir: Path = DATA_DIR
    catalog_file: Path = CATALOG_FILE


@dataclass
class DatabaseSettings:
    """Database configuration settings."""
    url: str = os.getenv("DATABASE_URL", f"sqlite:///{DATA_DIR / 'progress.db'}")
    echo: bool = os.getenv("DATABASE_ECHO", "false").lower() == "true"


@dataclass
class LoggingSettings:
    """Logging configuration settings."""
    level: str = os.getenv("LOG_LEVEL", "INFO")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    dir: Optional[str] = os.getenv("LOG_DIR", None)
    rotation: str = os.getenv("LOG_ROTATION", "midnight")
    interval: int = int(os.getenv("LOG_INTERVAL", "1"))
    backup_count: int = int(os.getenv("LOG_BACKUP_COUNT", "7"))


@dataclass
class DrillSettings:
    """Drill and progress settings."""
    max_score: int = MAX_SCORE
    storage_key: str = os.getenv("PROGRESS_STORAGE_KEY", DEFAULT_STORAGE_KEY)
    alien_category: str = os.getenv("ALIEN_CATEGORY", "alien")


def get_metrics_port() -> Optional[int]:
    """Get the metrics port from environment variable."""
    port = os.getenv("METRICS_PORT", "")
    return int(port) if port else None


@dataclass
class MonitoringSettings:
    """Monitoring settings."""
    port: Optional[int] = field(default_factory=get_metrics_port)


def get_path_settings() -> PathSettings:
    """Get path settings."""
    return PathSettings()


def get_database_settings() -> DatabaseSettings:
    """Get database settings."""
    return DatabaseSettings()


def get_logging_settings() -> LoggingSettings:
    """Get logging settings."""
    return LoggingSettings()


def get_drill_settings() -> DrillSettings:
    """Get drill settings."""
    return DrillSettings()


def get_monitoring_settings() -> MonitoringSettings:
    """Get monitoring settings."""
    return MonitoringSettings()


@dataclass
class Settings:
    """Main settings class that combines all configuration settings."""
    paths: PathSettings = field(default_factory=get_path_settings)
    database: DatabaseSettings = field(default_factory=get_database_settings)
    logging: LoggingSettings = field(default_factory=get_logging_settings)
    drill: DrillSettings = field(default_factory=get_drill_settings)
    monitoring: MonitoringSettings = field(default_factory=get_monitoring_settings)

    def validate(self) -> None:
        """Validate settings and raise ValueError if invalid."""
        if not self.database.url:
            raise ValueError("DATABASE_URL is required")

        if not self.drill.storage_key:
            raise ValueError("PROGRESS_STORAGE_KEY cannot be empty")

        if self.drill.max_score < 1:
            raise ValueError("max_score must be positive")

        if self.logging.interval < 1:
            raise ValueError("LOG_INTERVAL must be positive")

        if self.monitoring.port is not None and not 0 < self.monitoring.port < 65536:
            raise ValueError("METRICS_PORT must be a valid port number")


# Create global settings instance
settings = Settings()
settings.validate()
