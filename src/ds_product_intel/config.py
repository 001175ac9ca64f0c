from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Database
    database_url: str = "sqlite+aiosqlite:///./data.db"

    # Scheduling intervals
    scoring_interval_hours: int = 6

    # Batch evaluation (thread pool size, 0 = sequential)
    batch_workers: int = 0

    # Classification thresholds (overall score)
    hot_product_threshold: int = 70
    alert_threshold: int = 85
    creative_threshold: int = 60

    # Score history window (days)
    score_history_days: int = 30

    # Subscription tier is supplied upstream in this header
    tier_header: str = "X-Subscription-Tier"

    # App
    api_host: str = "127.0.0.1"
    api_port: int = 8000
    log_level: str = "INFO"


settings = Settings()
