"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "credit-risk-assessor"
    log_level: str = "INFO"

    # Data files
    customer_data_path: str = "Data/customers.json"
    reports_dir: str = "Reports"

    # Batch evaluation: record invalid customers instead of aborting the batch
    skip_invalid_customers: bool = False


settings = Settings()
