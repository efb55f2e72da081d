import os
from typing import Optional


class EnvManager:
    """Read configuration values from the process environment."""

    @staticmethod
    def get_env_variable(name: str, default: Optional[str] = None) -> Optional[str]:
        value = os.environ.get(name)
        if value is None or value == "":
            return default
        return value

    @staticmethod
    def get_int(name: str, default: int) -> int:
        value = EnvManager.get_env_variable(name)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            raise ValueError(f"Environment variable {name} must be an integer, got {value!r}")
