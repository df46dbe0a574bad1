from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class ApiConfig(BaseSettings):
    # Database Configuration
    db_host: str = Field(alias="DB_HOST")
    db_user: str = Field(alias="DB_USER")
    db_password: str = Field(alias="DB_PASSWORD")
    db_name: str = Field(alias="DB_NAME")
    db_port: int = Field(default=3306, alias="DB_PORT")
    db_driver: str = Field(default="mysql+aiomysql", alias="DB_DRIVER")
    db_url: Optional[str] = Field(default=None, alias="DB_URL")  # Full URL, overrides the parts above

    # Server Configuration
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=5000, alias="PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Path to .env file (for loading env vars)
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    @property
    def database_url(self) -> str | URL:
        if self.db_url:
            return self.db_url
        return URL.create(
            self.db_driver,
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )


class DisplayConfig(BaseSettings):
    api_base_url: str = Field(alias="API_BASE_URL")
    api_timeout: Optional[float] = Field(default=None, alias="API_TIMEOUT")  # None waits forever

    host: str = Field(default="0.0.0.0", alias="DISPLAY_HOST")
    port: int = Field(default=3000, alias="DISPLAY_PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )
