"""
Core configuration for the Invoice Intake API.
Manages environment variables for storage, pagination and the processing simulator.
"""
import os
from typing import Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""
    
    # API Configuration
    api_title: str = os.getenv("API_TITLE", "Invoice Intake API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    environment: str = os.getenv("ENVIRONMENT", "dev")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")
    
    # File Storage
    storage_backend: str = os.getenv("STORAGE_BACKEND", "local")
    upload_dir: str = os.getenv("UPLOAD_DIR", "uploads")
    aws_region: str = os.getenv("AWS_REGION", "us-east-1")
    s3_bucket_name: str = os.getenv("S3_BUCKET_NAME", "")
    
    # File Upload Limits
    max_file_size_mb: int = int(os.getenv("MAX_FILE_SIZE_MB", "10"))
    
    # Pagination Configuration
    pagination_default_limit: int = int(os.getenv("PAGINATION_DEFAULT_LIMIT", "10"))
    pagination_max_limit: int = int(os.getenv("PAGINATION_MAX_LIMIT", "100"))
    
    # Processing Simulator
    processing_start_delay_ms: int = int(os.getenv("PROCESSING_START_DELAY_MS", "1000"))
    processing_min_ms: int = int(os.getenv("PROCESSING_MIN_MS", "15000"))
    processing_max_ms: int = int(os.getenv("PROCESSING_MAX_MS", "45000"))
    processing_success_rate: float = float(os.getenv("PROCESSING_SUCCESS_RATE", "0.8"))
    random_seed: Optional[int] = None
    
    @property
    def max_file_size_bytes(self) -> int:
        return self.max_file_size_mb * 1024 * 1024
    
    @property
    def cors_origin_list(self) -> list[str]:
        """CORS origins as a list, split on commas."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]
    
    class Config:
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()
