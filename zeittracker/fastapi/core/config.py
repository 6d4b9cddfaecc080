from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Application settings
    APP_NAME: str = "ZeitTracker"
    APP_VERSION: str = "1.0.0"

    # Database URL (read from .env file)
    DATABASE_URL: str = ''

    # Storage backend: 'database' or 'memory'
    STORAGE_BACKEND: str = 'database'

    # Admin account created on first start when no admin exists
    INITIAL_ADMIN_USERNAME: str = 'admin'
    INITIAL_ADMIN_PASSWORD: str = 'admin123'

    # Client URL for CORS
    CLIENT_URL: str = 'http://localhost:3000'
    ADDITIONAL_CORS_ORIGINS: str = ''

    LOG_LEVEL: str = 'INFO'

    model_config = SettingsConfigDict(env_file=".env", extra='allow')

    @property
    def DB_URL(self) -> str:
        if self.ENV_MODE == "dev":
            url = self.DEV_DB_URL
        elif self.DATABASE_URL:
            url = self.DATABASE_URL
        else:
            url = '{}://{}:{}@{}:{}/{}'.format(
                self.DB_ENGINE,
                self.DB_USERNAME,
                self.DB_PASS,
                self.DB_HOST,
                self.DB_PORT,
                self.DB_NAME
            )

        # Normalize 'postgres://' to 'postgresql://'
        if url.startswith("postgres://"):
            url = url.replace("postgres://", "postgresql://", 1)
        return url

    @property
    def CORS_ORIGINS(self) -> list[str]:
        origins = [
            self.CLIENT_URL,
            "http://localhost",
            "http://localhost:3000",
            "http://localhost:5000",
            "http://localhost:8000",
            "http://127.0.0.1:3000",
            "http://127.0.0.1:5000",
            "http://127.0.0.1:8000"
        ]
        if self.ADDITIONAL_CORS_ORIGINS:
            origins.extend(origin.strip() for origin in self.ADDITIONAL_CORS_ORIGINS.split(","))

        # Remove empty strings and duplicates, keep order
        return list(dict.fromkeys(origin for origin in origins if origin))

class DevSettings(Settings):
    # Environment mode: 'dev' or 'prod'
    ENV_MODE: str = 'dev'

    @property
    def DEV_DB_URL(self) -> str:
        # Use DATABASE_URL in dev mode if provided in .env
        # Otherwise fall back to SQLite
        return self.DATABASE_URL if self.DATABASE_URL else "sqlite:///./zeittracker.db"

    model_config = SettingsConfigDict(env_file=".env", extra='allow')

class ProdSettings(Settings):
    # Environment mode: 'dev' or 'prod'
    ENV_MODE: str = 'prod'

    # Database settings for production
    DB_ENGINE: str = 'postgresql'
    DB_USERNAME: str = ''
    DB_PASS: str = ''
    DB_HOST: str = ''
    DB_PORT: str = '5432'
    DB_NAME: str = ''

    model_config = SettingsConfigDict(env_file=".env", extra='allow')

def get_settings(env_mode: str = "dev") -> Settings:
    if env_mode == "dev":
        return DevSettings()
    return ProdSettings()
