from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Datacenter id for the shared generator. 0 = derive from the host's MAC address
    SNOWFLAKE_DATACENTER_ID: int = 0

    # Yield the CPU between clock polls while waiting out a sequence rollover
    SNOWFLAKE_SPIN_YIELD: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"

    # App
    APP_NAME: str = "Snowflake ID Generator"


settings = Settings()
