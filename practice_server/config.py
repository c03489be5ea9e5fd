from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_ignore_empty=True
    )

    HOST: str = "0.0.0.0"
    PORT: int = 3001
    ALLOWED_ORIGINS: list[str] = []


settings = Settings()
