import os


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    # Pad function parameter lists: "foo( int x )" instead of "foo(int x)"
    EXTRA_SPACE = _env_flag("COMPLETION_DATA_EXTRA_SPACE")
    LOG_LEVEL = os.getenv("COMPLETION_DATA_LOG_LEVEL", "WARNING")


def enable_extra_space() -> None:
    Config.EXTRA_SPACE = True


def disable_extra_space() -> None:
    Config.EXTRA_SPACE = False


def extra_space_enabled() -> bool:
    return Config.EXTRA_SPACE
