from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

class Settings(BaseSettings):
    # Environment
    ENVIRONMENT: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # API Settings
    PROJECT_NAME: str = "Trip Ledger API"
    API_V1_STR: str = "/api/v1"
    PROJECT_VERSION: str = "0.1.0"
    DESCRIPTION: str = "Shared trip expense balances and settlement plans"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8000"]

    # Money
    BASE_CURRENCY: str = "USD"
    DECIMAL_PRECISION: int = 28

    # Ledger
    SETTLE_THRESHOLD: str = "0.01"   # balances within this of zero are settled
    SPLIT_TOLERANCE: str = "0.01"    # allowed drift between custom shares and the total
    RECENT_TRANSACTIONS_LIMIT: int = 3

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env"
    )

settings = Settings()
