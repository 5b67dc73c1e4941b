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
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ADMIN_API_KEY = data.get("ADMIN_API_KEY", "test-admin-key-12345")

    # Password reset
    RESET_LINK_BASE_URL = data.get("RESET_LINK_BASE_URL", "http://localhost:3000")
    DIGEST_SECRET_KEY = data.get("DIGEST_SECRET_KEY", "dev-digest-key-change-in-production")
    RESET_TOKEN_TTL_SECONDS = data.get("RESET_TOKEN_TTL_SECONDS", 3600)
    RESET_CONCEAL_UNKNOWN_EMAIL = bool(data.get("RESET_CONCEAL_UNKNOWN_EMAIL", False))

    # Outbound email
    SMTP_HOST = data.get("SMTP_HOST", "")
    SMTP_PORT = data.get("SMTP_PORT", 587)
    SMTP_USERNAME = data.get("SMTP_USERNAME", "")
    SMTP_PASSWORD = data.get("SMTP_PASSWORD", "")
    SMTP_FROM_EMAIL = data.get("SMTP_FROM_EMAIL", "")
    SMTP_FROM_NAME = data.get("SMTP_FROM_NAME", "")
    SMTP_START_TLS = bool(data.get("SMTP_START_TLS", True))
    SMTP_TIMEOUT = data.get("SMTP_TIMEOUT", 15)
