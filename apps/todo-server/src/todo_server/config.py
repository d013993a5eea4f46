import os
from dataclasses import dataclass


def env(key: str, default: str) -> str:
    return os.getenv(key, default)


@dataclass
class Config:
    # Backing file holding the full todo list as a JSON array
    DATA_FILE: str = env("DATA_FILE", os.path.abspath("todos.json"))

    PORT: int = int(env("PORT", "4000"))
    DEBUG: bool = env("DEBUG", "0") == "1"
    LOG_LEVEL: str = env("LOG_LEVEL", "INFO")
