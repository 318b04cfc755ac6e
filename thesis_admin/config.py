from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "postgresql+asyncpg://thesis:thesis@db:5432/thesis"
    session_cookie_name: str = "session_token"
    log_level: str = "INFO"
    history_page_size: int = 50

    model_config = {"env_prefix": ""}


settings = Settings()
