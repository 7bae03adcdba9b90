"""Application configuration."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from environment variables."""

    app_name: str = "Studio API"
    environment: str = "development"
    debug: bool = False
    api_prefix: str = "/api"
    cors_origins: str = "http://localhost:5173,http://127.0.0.1:5173"
    database_url: str = "sqlite:///./studio.db"  # Use DATABASE_URL env for PostgreSQL
    jwt_secret: str = "dev-secret-change-in-production"
    jwt_algorithm: str = "HS256"
    jwt_expires_days: int = 7
    bcrypt_rounds: int = 12
    # Brevo transactional email
    brevo_api_key: str = ""
    brevo_api_url: str = "https://api.brevo.com/v3/smtp/email"
    lead_email_to: str = "hello@studio.dev"
    lead_sender_email: str = "no-reply@studio.dev"
    # Optional admin account created on startup
    admin_email: str = ""
    admin_username: str = "admin"
    admin_password: str = ""

    @property
    def exposes_errors(self) -> bool:
        """Whether 500 responses may carry the exception text."""
        return self.environment == "development" and self.debug

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
