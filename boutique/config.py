from typing import Optional

from pydantic_settings import BaseSettings
from urllib.parse import quote_plus

class Settings(BaseSettings):
    ENV: str = "local"
    log_level: str = "INFO"

    postgres_user: str = "boutique"
    postgres_password: str = "boutique"
    postgres_db: str = "boutique"
    postgres_host: str = "localhost"
    postgres_port: str = "5432"

    # full SQLAlchemy URL, wins over the postgres_* parts when set
    database_uri: Optional[str] = None

    secret_key: str
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24 * 7
    auth_cookie_name: str = "auth-token"

    # checkout pricing
    tax_rate: float = 0.18
    shipping_flat_rate: float = 99
    free_shipping_threshold: float = 999
    fabric_meters_per_garment: float = 1.5

    # invoice letterhead
    store_name: str = "Ishq-e-Libas"
    store_tagline: str = "Women's Fashion Boutique"
    support_email: str = "contact@ishqelibas.com"

    order_number_attempts: int = 5
    low_stock_threshold: int = 10
    custom_order_match_window_hours: int = 24

    @property
    def database_url(self):
        if self.database_uri:
            return self.database_uri

        encoded_password = quote_plus(self.postgres_password)
        return (
            f"postgresql+psycopg2://{self.postgres_user}:"
            f"{encoded_password}@{self.postgres_host}:"
            f"{self.postgres_port}/{self.postgres_db}"
        )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "allow"

settings = Settings()
