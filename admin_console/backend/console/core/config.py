import os
from dotenv import load_dotenv

load_dotenv()

class Settings:
    # Remote collections (the REST API the console talks to)
    API_BASE_URL: str = os.getenv("API_BASE_URL", "http://localhost:3001")
    REQUEST_TIMEOUT: float = float(os.getenv("REQUEST_TIMEOUT", "10"))
    PRIMARY_COMPANY_ID: int = int(os.getenv("PRIMARY_COMPANY_ID", "1"))

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE: str | None = os.getenv("LOG_FILE") or None
    LOG_MAX_BYTES: int = int(os.getenv("LOG_MAX_BYTES", str(5 * 1024 * 1024)))
    LOG_BACKUPS: int = int(os.getenv("LOG_BACKUPS", "3"))

    # Dev API server
    POSTGRES_USER: str = os.getenv("POSTGRES_USER", "console_admin")
    POSTGRES_PASSWORD: str = os.getenv("POSTGRES_PASSWORD", "console_pass")
    POSTGRES_DB: str = os.getenv("POSTGRES_DB", "console_db")
    POSTGRES_HOST: str = os.getenv("POSTGRES_HOST", "localhost")
    POSTGRES_PORT: str = os.getenv("POSTGRES_PORT", "5432")

    SEED_DEMO_DATA: bool = os.getenv("SEED_DEMO_DATA", "1") == "1"

    @property
    def DATABASE_URL(self) -> str:
        explicit = os.getenv("DATABASE_URL")
        if explicit:
            return explicit

        # SQLite mode (no Postgres / no Docker)
        sqlite_path = os.getenv("SQLITE_PATH", "console_local.db")
        use_sqlite = os.getenv("USE_SQLITE", "1") == "1"

        if use_sqlite:
            return f"sqlite+aiosqlite:///./{sqlite_path}"

        return (
            f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )


settings = Settings()
