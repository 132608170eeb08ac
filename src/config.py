from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Exchange rate service
    exchange_rate_api_url: str = "https://v6.exchangerate-api.com/v6"
    exchange_rate_api_key: str = ""
    exchange_rate_timeout_seconds: float = 15.0

    # Currencies
    base_currency: str = "USD"  # Schedules are always computed in this currency
    default_display_currency: str = "USD"
    supported_currencies: list[str] = ["USD", "EUR", "INR"]

    # Dashboard -> API
    api_base_url: str = "http://localhost:8000"

    # App
    debug: bool = False
    log_level: str = "INFO"


settings = Settings()
