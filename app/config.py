from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    goals_file: str = "goals.json"  # Default save/load path, relative to cwd
    quest_api_key: str | None = None

    # Bonus awarded when a checklist goal is created without an explicit one
    checklist_default_bonus: int = 500

    log_level: str = "INFO"
    log_format: str = "%(asctime)s [%(levelname)-5s] %(name)-20s | %(message)s"
    log_datefmt: str = "%H:%M:%S"
    autoload_goals: bool = True  # Load goals_file when the HTTP app starts

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
