"""
Application settings loaded from environment variables.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Security Secrets ──────────────────────────────────────────────────
    jwt_secret: str = Field(..., min_length=1)          # HMAC secret for access tokens
    access_token_expiry_minutes: int = 36000            # 600 hours, not renewable
    bcrypt_rounds: int = 10                             # password hashing work factor

    # ── Database ─────────────────────────────────────────────────────────
    database_url: str = Field(..., min_length=1)

    # ── Server ───────────────────────────────────────────────────────────
    port: int = 8000
    host: str = "0.0.0.0"
    debug: bool = False
    cors_origins: list = ["*"]

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
    }

    @property
    def access_token_expiry_seconds(self) -> int:
        return self.access_token_expiry_minutes * 60


config = Settings()
