import logging

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    service_name: str = "topup"
    api_prefix: str = "/api/admin"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 8000

    transaction_id_prefix: str = "txn"
    transaction_id_random_length: int = 9


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
