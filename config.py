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
    STORAGE_BACKEND = data.get("STORAGE_BACKEND", "memory")  # memory | sql
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./marketplace.db")
    API_PREFIX = data.get("API_PREFIX", "")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")

    # Subscription pricing (simulated payments)
    SUBSCRIPTION_AMOUNT = data.get("SUBSCRIPTION_AMOUNT", 2000)
    SUBSCRIPTION_CURRENCY = data.get("SUBSCRIPTION_CURRENCY", "RWF")

    SEED_DEFAULT_CATEGORIES = bool(data.get("SEED_DEFAULT_CATEGORIES", True))

    # Ledger audit worker
    LEDGER_AUDIT_ENABLED = bool(data.get("LEDGER_AUDIT_ENABLED", True))
    LEDGER_AUDIT_INTERVAL_SECONDS = data.get("LEDGER_AUDIT_INTERVAL_SECONDS", 3600)
