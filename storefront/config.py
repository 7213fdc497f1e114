from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from urllib.parse import quote_plus

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="allow"
    )

    ENV: str = "local"
    LOG_LEVEL: str = "INFO"

    postgres_user: Optional[str] = None
    postgres_password: Optional[str] = None
    postgres_db: Optional[str] = None
    postgres_host: str = "localhost"
    postgres_port: str = "5432"

    sqlite_path: str = "storefront.db"

    secret_key: str = "change-me-in-production"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60

    MAIL_FROM: str = "orders@example.com"
    STORE_NAME: str = "My Awesome Store"
    BREVO_API_KEY: Optional[str] = None

    DEFAULT_PAGE_SIZE: int = 15

    # Re-price guest cart lines from the catalog instead of trusting the client
    REPRICE_GUEST_ITEMS: bool = False

    @property
    def database_url(self):
        if not self.postgres_db:
            return f"sqlite:///{self.sqlite_path}"

        encoded_password = quote_plus(self.postgres_password or "")
        return (
            f"postgresql+psycopg2://{self.postgres_user}:"
            f"{encoded_password}@{self.postgres_host}:"
            f"{self.postgres_port}/{self.postgres_db}"
        )

settings = Settings()
