import os
import logging
from dataclasses import dataclass, replace
from dotenv import load_dotenv


DEFAULT_LOG_LEVEL = "info"
DEFAULT_ADDR = "localhost"
DEFAULT_PORT = 8080
DEFAULT_STATIC_DIR = "./dist"

LOG_LEVELS = ("critical", "error", "warning", "info", "debug", "trace")


@dataclass(frozen=True)
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    addr: str = DEFAULT_ADDR
    port: int = DEFAULT_PORT
    static_dir: str = DEFAULT_STATIC_DIR

    def with_overrides(self, **overrides) -> "Settings":
        """
        Returns a copy where every non-None override replaces the stored value.
        Used by the CLI: flags that were not passed keep the env/default value.
        """

        values = {key: value for key, value in overrides.items() if value is not None}
        if "log_level" in values:
            values["log_level"] = parse_log_level(values["log_level"])
        if "port" in values:
            values["port"] = parse_port(values["port"])

        return replace(self, **values)


def parse_log_level(level: str) -> str:
    normalized = str(level).strip().lower()
    if normalized not in LOG_LEVELS:
        raise ValueError(
            f"Invalid log level: {level}. Expected one of {', '.join(LOG_LEVELS)}.")
    return normalized


def parse_port(port) -> int:
    try:
        value = int(port)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid port: {port}. Must be an integer.")
    if not 0 <= value <= 65535:
        raise ValueError(f"Invalid port: {port}. Must be in 0..65535.")
    return value


def load_settings() -> Settings:
    """
    Reads the server settings from the environment (.env is loaded first).
    Missing variables fall back to the defaults.
    """

    load_dotenv()

    return Settings(
        log_level=parse_log_level(
            os.environ.get("CARDTABLE_LOG_LEVEL", DEFAULT_LOG_LEVEL)),
        addr=os.environ.get("CARDTABLE_ADDR", DEFAULT_ADDR),
        port=parse_port(os.environ.get("CARDTABLE_PORT", DEFAULT_PORT)),
        static_dir=os.environ.get("CARDTABLE_STATIC_DIR", DEFAULT_STATIC_DIR),
    )


def configure_logging(level: str) -> None:
    # uvicorn knows "trace", the logging module does not
    numeric_level = logging.DEBUG if level == "trace" else getattr(logging, level.upper())
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
