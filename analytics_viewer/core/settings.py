# analytics_viewer/core/settings.py

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    ANALYTICS_API_BASE_URL: str = "https://fiber.preciousifeaka.site"
    REQUEST_TIMEOUT_SECONDS: float = 30.0
    CURRENCY_CODE: str = "NGN"
    LOG_DIR: str = "logs"
    LOG_LEVEL: str = "INFO"
    DISCORD_WEBHOOK_URL: str = ""


    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
