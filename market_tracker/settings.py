import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()


class Settings(BaseModel):
    # Backend
    api_base: str = Field(
        default="https://backend-xi-seven-28.vercel.app/api", alias="MARKET_API_BASE"
    )
    request_timeout: float = Field(default=30.0, alias="REQUEST_TIMEOUT")

    # Retry policy
    retry_delay: float = Field(default=2.0, alias="RETRY_DELAY")
    retry_writes: bool = Field(default=False, alias="RETRY_WRITES")

    # Static credentials for scripted runs (optional)
    api_token: str | None = Field(default=None, alias="MARKET_API_TOKEN")
    api_principal: str = Field(default="service", alias="MARKET_API_PRINCIPAL")

    debug: bool = Field(default=False, alias="DEBUG")

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the process environment (.env already loaded)."""
        return cls.model_validate(dict(os.environ))


global_settings = Settings.from_env()
