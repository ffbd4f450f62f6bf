import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file)
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./test.db")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    IDENTITY_PROVIDER_URL = data.get("IDENTITY_PROVIDER_URL", "http://localhost:9000")
    IDENTITY_PROVIDER_API_KEY = data.get("IDENTITY_PROVIDER_API_KEY", "")
    IDENTITY_PROVIDER_TIMEOUT = float(data.get("IDENTITY_PROVIDER_TIMEOUT", 5.0))
    DEFAULT_SIDEBAR_LOGO = data.get("DEFAULT_SIDEBAR_LOGO", "/assets/default-logo.svg")
