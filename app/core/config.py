from typing import List
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    PROJECT_NAME: str = "Health Portal Backend"
    API_PREFIX: str = "/api"

    # Server
    PORT: int = 3001
    ENVIRONMENT: str = "development"
    CORS_ORIGINS: List[str] = ["*"]

    # Logging
    LOG_LEVEL: str = "INFO"
    ERROR_LOG_PATH: str = "logs/errors.log"

    # Notifications (contact form -> owner mailbox)
    SMTP_SERVER: str = "smtp.gmail.com"
    SMTP_PORT: int = 587
    SMTP_USERNAME: str = ""
    SMTP_PASSWORD: str = ""
    CONTACT_NOTIFY_EMAIL: str = ""

    # Admin panel
    ADMIN_API_URL: str = "http://localhost:3001"

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
