from dotenv import load_dotenv
from dataclasses import dataclass
from pathlib import Path
import json
import os

load_dotenv()  # Loads variables from .env file


class Settings:
    """
    Manages application settings loaded from environment variables.
    """
    # Deployment environment; NODE_ENV is honoured for hosts shared with a Node frontend
    APP_ENV = os.getenv("APP_ENV", os.getenv("NODE_ENV", "development"))

    # Remote rendering service (Browserless)
    BROWSERLESS_TOKEN = os.getenv("BROWSERLESS_TOKEN", os.getenv("BLESS_KEY"))
    BROWSERLESS_PERFORMANCE_URL = os.getenv(
        "BROWSERLESS_PERFORMANCE_URL",
        "https://production-sfo.browserless.io/performance",
    )
    BROWSERLESS_WS_URL = os.getenv(
        "BROWSERLESS_WS_URL", "wss://production-sfo.browserless.io"
    )

    # Local Lighthouse CLI
    LIGHTHOUSE_PATH = os.getenv("LIGHTHOUSE_PATH", "lighthouse")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()


@dataclass
class Config:
    """Runtime configuration for a landing page analysis."""
    viewport_width: int = 1920
    viewport_height: int = 1080
    navigation_timeout_ms: int = 30000
    audit_timeout_s: int = 60
    headless: bool = True
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables.

        Returns:
            Config: Configuration instance with values from environment
        """
        return cls(
            viewport_width=int(os.getenv("VIEWPORT_WIDTH", "1920")),
            viewport_height=int(os.getenv("VIEWPORT_HEIGHT", "1080")),
            navigation_timeout_ms=int(os.getenv("NAVIGATION_TIMEOUT_MS", "30000")),
            audit_timeout_s=int(os.getenv("AUDIT_TIMEOUT_S", "60")),
            headless=os.getenv("HEADLESS", "true").lower() != "false",
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


@dataclass
class ScoringThresholds:
    """Configurable thresholds for landing page scoring."""

    # CTA
    cta_max_above_fold: int = 2  # More than this many above-fold CTAs compete
    cta_min_text_length: int = 2
    cta_max_text_length: int = 150

    # Whitespace
    whitespace_grid_columns: int = 3
    whitespace_grid_rows: int = 4
    whitespace_dense_threshold: float = 3.0  # elements per 10,000px²

    # Speed
    slow_ttfb_ms: int = 800

    # Priority
    collapse_threshold: int = 85  # Sections at or above this are healthy
    top_fixes_limit: int = 3

    @classmethod
    def from_env(cls) -> "ScoringThresholds":
        """Load thresholds from environment variables.

        Environment variables should be prefixed with LANDING_THRESHOLD_
        e.g., LANDING_THRESHOLD_COLLAPSE_THRESHOLD=90

        Returns:
            ScoringThresholds with values from environment
        """
        thresholds = cls()
        prefix = "LANDING_THRESHOLD_"

        for field_name in thresholds.__dataclass_fields__:
            env_key = f"{prefix}{field_name.upper()}"
            env_value = os.getenv(env_key)

            if env_value is not None:
                field_type = thresholds.__dataclass_fields__[field_name].type
                try:
                    if field_type in (int, "int"):
                        setattr(thresholds, field_name, int(env_value))
                    elif field_type in (float, "float"):
                        setattr(thresholds, field_name, float(env_value))
                except ValueError:
                    pass  # Keep default if conversion fails

        return thresholds

    @classmethod
    def from_file(cls, path: str) -> "ScoringThresholds":
        """Load thresholds from a JSON configuration file.

        Args:
            path: Path to JSON configuration file

        Returns:
            ScoringThresholds with values from file
        """
        thresholds = cls()
        file_path = Path(path)

        if not file_path.exists():
            return thresholds

        with open(file_path, 'r') as f:
            config = json.load(f)

        threshold_config = config.get('thresholds', config)

        for field_name in thresholds.__dataclass_fields__:
            if field_name in threshold_config:
                setattr(thresholds, field_name, threshold_config[field_name])

        return thresholds

    def to_dict(self) -> dict:
        """Convert thresholds to dictionary.

        Returns:
            Dictionary of all threshold values
        """
        return {
            field_name: getattr(self, field_name)
            for field_name in self.__dataclass_fields__
        }

    def save_to_file(self, path: str) -> None:
        """Save current thresholds to a JSON file.

        Args:
            path: Path to save configuration
        """
        with open(path, 'w') as f:
            json.dump({'thresholds': self.to_dict()}, f, indent=2)


# Global default thresholds instance
default_thresholds = ScoringThresholds()
