import logging
import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


def resolve_log_level(name: str | None, default: str = "INFO") -> str:
    """Upper-cased level name, or `default` when logging does not know it."""
    candidate = (name or "").strip().upper()
    if isinstance(logging.getLevelName(candidate), int):
        return candidate
    return default


def _env_flag(name: str, default: str = "False") -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


@dataclass
class Settings:
    # API settings
    api_host: str = os.getenv("API_HOST", "127.0.0.1")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_key: str = os.getenv("API_KEY", "super-secret-key")
    # Empty means "derive from api_host/api_port"
    api_base_url: str = os.getenv("API_BASE_URL", "")
    http_timeout: float = float(os.getenv("HTTP_TIMEOUT", "10"))

    # Application settings
    app_name: str = os.getenv("APP_NAME", "Library Catalog")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG")
    log_level: str = os.getenv("LOG_LEVEL", "")

    # CLI output: plain | json | rich
    output_mode: str = os.getenv("LIB_CLI_OUTPUT", "plain")

    def __post_init__(self) -> None:
        if not self.api_base_url:
            self.api_base_url = f"http://{self.api_host}:{self.api_port}"
        if not self.log_level:
            self.log_level = "DEBUG" if self.debug else "INFO"
        self.log_level = resolve_log_level(self.log_level)


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Install the root handler once; later calls only adjust the level."""
    root = logging.getLogger()
    resolved = resolve_log_level(level or settings.log_level)
    if not root.handlers:
        logging.basicConfig(
            level=resolved,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    else:
        root.setLevel(resolved)
