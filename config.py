import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    SERVICE_NAME = data.get("SERVICE_NAME", "florka-api")
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./florka.db")
    AUTO_CREATE_TABLES = bool(data.get("AUTO_CREATE_TABLES", True))
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    DEBUG = bool(data.get("DEBUG", False))
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))

    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    JWT_REFRESH_SECRET = data.get(
        "JWT_REFRESH_SECRET", "dev-refresh-secret-key-change-in-production"
    )
    JWT_ACCESS_EXPIRES_MINUTES = int(data.get("JWT_ACCESS_EXPIRES_MINUTES", 24 * 60))
    JWT_REFRESH_EXPIRES_MINUTES = int(data.get("JWT_REFRESH_EXPIRES_MINUTES", 7 * 24 * 60))
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 12))

    RATE_LIMIT_BACKEND = data.get("RATE_LIMIT_BACKEND", "memory")
    REDIS_URL = data.get("REDIS_URL", "redis://localhost:6379/0")
    RATE_LIMIT_PURGE_INTERVAL_SECONDS = int(data.get("RATE_LIMIT_PURGE_INTERVAL_SECONDS", 60))
    REGISTER_RATE_LIMIT = int(data.get("REGISTER_RATE_LIMIT", 5))
    REGISTER_RATE_WINDOW_SECONDS = int(data.get("REGISTER_RATE_WINDOW_SECONDS", 15 * 60))
    LOGIN_RATE_LIMIT = int(data.get("LOGIN_RATE_LIMIT", 3))
    LOGIN_RATE_WINDOW_SECONDS = int(data.get("LOGIN_RATE_WINDOW_SECONDS", 15 * 60))

    DEFAULT_ADMIN_EMAIL = data.get("DEFAULT_ADMIN_EMAIL", "admin@florkanewfun.com")
    DEFAULT_ADMIN_PASSWORD = data.get("DEFAULT_ADMIN_PASSWORD", "admin123456")
    DEFAULT_ADMIN_NAME = data.get("DEFAULT_ADMIN_NAME", "Default Admin")
