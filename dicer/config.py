from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DICER_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    environment: str = "local"
    debug: bool = False
    log_level: str = "WARNING"

    # Fixed seed for reproducible rolls. Unset means OS entropy per roll.
    rng_seed: int | None = None

    # Upper bound on the summed dice count of one expression over HTTP.
    # The library and CLI roll whatever they are given.
    max_dice_per_roll: int = 1000


settings = Settings()
