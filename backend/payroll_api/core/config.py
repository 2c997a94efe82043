from pathlib import Path

from pydantic_settings import BaseSettings

PACKAGE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    # App
    APP_ENV: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    ALLOWED_ORIGINS: str = "*"

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 3000

    # Database – SQLite für lokale Entwicklung
    DATABASE_URL: str = "sqlite+aiosqlite:///./payroll.db"

    # Frontend (index.html + Assets)
    STATIC_DIR: Path = PACKAGE_DIR / "static"

    @property
    def allowed_origins_list(self) -> list[str]:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",")]

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
