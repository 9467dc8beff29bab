# taskboard/core/config.py
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # server
    host: str = Field("0.0.0.0", alias="HOST")
    port: int = Field(3000, alias="PORT")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    cors_allow_origins: str = Field(
        "http://localhost:3000,http://localhost:5173", alias="CORS_ALLOW_ORIGINS"
    )

    # auth
    auth_enabled: bool = Field(True, alias="AUTH_ENABLED")
    jwt_secret_key: str = Field(..., alias="JWT_SECRET_KEY", min_length=1)
    jwt_algorithm: str = Field("HS256", alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(120, alias="ACCESS_TOKEN_EXPIRE_MINUTES")
    bcrypt_rounds: int = Field(10, alias="BCRYPT_ROUNDS", ge=4, le=31)

    class Config:
        env_file = ".env"
        extra = "ignore"

    @property
    def origins(self) -> list[str]:
        return [o.strip() for o in self.cors_allow_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
