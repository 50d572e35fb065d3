"""Application configuration"""
from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional


class Settings(BaseSettings):
    """Application settings"""

    # Outbound SMTP transport
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 587
    smtp_username: str
    smtp_password: str
    smtp_start_tls: bool = True
    smtp_use_tls: bool = False  # implicit TLS (port 465); mutually exclusive with STARTTLS
    smtp_timeout: float = 30.0

    # Addresses
    mail_from: Optional[str] = None  # falls back to smtp_username
    admin_email: Optional[str] = None  # falls back to smtp_username
    company_name: str = "Guard Armor"

    # Application
    environment: str = "development"
    cors_origins: list[str] = ["*"]
    port: int = 3001
    log_dir: Optional[str] = None

    # Request limits
    rate_limit: str = "5/15minute"
    rate_limit_enabled: bool = True
    max_body_bytes: int = 10 * 1024

    class Config:
        env_file = ".env"
        case_sensitive = False

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def sender_address(self) -> str:
        return self.mail_from or self.smtp_username

    @property
    def admin_address(self) -> str:
        return self.admin_email or self.smtp_username


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
