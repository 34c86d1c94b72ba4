from pydantic_settings import BaseSettings
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

class Settings(BaseSettings):
    # Database settings
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./todo.db")
    SQL_ECHO: bool = False
    # Seconds the driver waits on a locked database before failing the transaction
    DB_TIMEOUT: float = 30.0

    # JWT settings (tokens are issued elsewhere; we only read the owner id)
    SECRET_KEY: str = os.getenv("SECRET_KEY", "your-super-secret-key-change-in-production")
    ALGORITHM: str = os.getenv("ALGORITHM", "HS256")

    LOG_LEVEL: str = "INFO"

    # Project settings
    PROJECT_NAME: str = os.getenv("PROJECT_NAME", "Todo Backend")
    API_V1_STR: str = "/api/v1"

    class Config:
        env_file = ".env"
        # Variables in .env that aren't defined here are simply ignored.
        extra = "ignore"

settings = Settings()
