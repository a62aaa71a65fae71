from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # .env is loaded manually in get_settings() so a missing or unreadable file
    # never breaks startup in containers / CI.
    model_config = SettingsConfigDict(extra="ignore", frozen=True)

    app_env: str = "dev"

    # None falls through to boto3's default credential chain.
    aws_access_key_id: str | None = None
    aws_secret_access_key: str | None = None
    aws_region: str | None = None
    s3_bucket_name: str = ""
    s3_endpoint_url: str | None = None

    storage_backend: str = "s3"  # "s3" | "local"
    local_storage_root: str = "./storage"

    static_dir: str = "public"
    allowed_origins: str = "http://localhost:3000"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 3000

    def origins(self) -> list[str]:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    try:
        from dotenv import load_dotenv

        load_dotenv(".env", override=False)
    except Exception:
        pass
    return Settings()
