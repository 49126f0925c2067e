"""
Core configuration for the Bridge Upload SDK.
Manages environment variables for SDK identification and logging.
"""
import os
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """SDK settings loaded from environment variables or .env file."""
    
    # SDK identification
    sdk_name: str = os.getenv("SDK_NAME", "Bridge Upload SDK")
    sdk_version: str = os.getenv("SDK_VERSION", "1.0.0")
    
    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_format: str = os.getenv("LOG_FORMAT", "console")
    
    # Environment
    environment: str = os.getenv("ENVIRONMENT", "dev")
    
    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


# Global settings instance
settings = Settings()
