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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./telecrm.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 3000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    SESSION_COOKIE_NAME = data.get("SESSION_COOKIE_NAME", "app_session_id")
    # External identifier auto-promoted to admin on upsert
    OWNER_OPEN_ID = data.get("OWNER_OPEN_ID", "")
    LOGIN_PATH = data.get("LOGIN_PATH", "/login")
    OAUTH_SERVER_URL = data.get("OAUTH_SERVER_URL", "")
    OAUTH_APP_ID = data.get("OAUTH_APP_ID", "")
    OAUTH_CLIENT_SECRET = data.get("OAUTH_CLIENT_SECRET", "")
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 12))
