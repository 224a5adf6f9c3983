import os
from typing import Optional
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings, SettingsConfigDict

APP_NAME = "Song Catalog"

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


class Settings(BaseSettings):
    # 起動後は変更しない (create_app に明示的に渡す)
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True)

    APP_NAME: str = APP_NAME
    ENV: str = "prod"

    # Database
    # DB_HOST が未設定の場合は組み込みの DuckDB ファイルを使用する
    DB_HOST: Optional[str] = None
    DB_PORT: int = 5432
    DB_USERNAME: str = "postgres"
    DB_PASSWORD: str = "postgres"
    DB_NAME: str = "music_library"
    DB_PATH: Optional[str] = None

    # Network
    SERVER_HOST: str = "0.0.0.0"
    SERVER_PORT: int = 8080

    # External metadata API
    MUSIC_API_URL: str = "http://localhost:8081"

    # Logging
    LOG_DIR: str = os.path.join(BASE_DIR, "logs")
    LOG_LEVEL: str = "INFO"

    @property
    def duckdb_path(self) -> str:
        if self.DB_PATH:
            return self.DB_PATH
        return os.path.join(BASE_DIR, "data", f"{self.DB_NAME}.duckdb")

    @property
    def uses_duckdb(self) -> bool:
        return not self.DB_HOST

    @property
    def database_url(self) -> str:
        """SQLAlchemy の接続URLを返す"""
        if self.uses_duckdb:
            return f"duckdb:///{self.duckdb_path}"
        return (
            f"postgresql+psycopg2://{quote_plus(self.DB_USERNAME)}:{quote_plus(self.DB_PASSWORD)}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )


settings = Settings()
