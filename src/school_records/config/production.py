import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

STORE_CONFIG = {
    "base_url": os.getenv("STORE_BASE_URL", ""),
    "project_id": os.getenv("STORE_PROJECT_ID", ""),
    "public_key": os.getenv("STORE_PUBLIC_KEY", ""),
    "timeout": float(os.getenv("STORE_TIMEOUT", "10")),
    "max_retries": int(os.getenv("STORE_MAX_RETRIES", "3")),
    "retry_backoff": float(os.getenv("STORE_RETRY_BACKOFF", "0.5")),
    "page_size": int(os.getenv("STORE_PAGE_SIZE", "100")),
}

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEBUG = False
