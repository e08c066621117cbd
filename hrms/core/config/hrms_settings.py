from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class HrmsSettings(BaseSettings):
    """Core application settings"""

    # Application
    app_name: str = "Fiber HRMS"
    debug: bool = False
    version: str = "1.0.0"
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # Database
    mongodb_uri: str = "mongodb://localhost:27017/fiber-hrms"
    database_name: str = "fiber-hrms"
    employee_collection: str = "employees"
    db_connection_timeout: int = 30  # seconds
    db_query_timeout: int = 60  # seconds

    # CORS
    cors_allowed_origins: list[str] = ["*"]
    cors_allow_credentials: bool = False
    cors_allowed_methods: list[str] = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    cors_allowed_headers: list[str] = ["*"]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def connection_timeout_ms(self) -> int:
        return self.db_connection_timeout * 1000

    @property
    def query_timeout_ms(self) -> int:
        return self.db_query_timeout * 1000


@lru_cache
def get_settings() -> HrmsSettings:
    return HrmsSettings()
