"""Per-user application directories for plain-path.

Directories are resolved through ``platformdirs`` and are only created on
demand by the code that writes into them.
"""

from pathlib import Path

from platformdirs import user_config_dir, user_log_dir

APP_NAME = "plain-path"


class GlobalPath:
    """Global path management for plain-path directories."""

    @classmethod
    def config(cls) -> str:
        """Configuration directory."""
        return user_config_dir(APP_NAME)

    @classmethod
    def config_file(cls) -> str:
        """Default configuration file."""
        return str(Path(cls.config()) / "config.json")

    @classmethod
    def log(cls) -> str:
        """Log file directory."""
        return user_log_dir(APP_NAME)
