import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

STORE_CONFIG = {
    "base_url": os.getenv("STORE_BASE_URL", "http://localhost:8080/api/v1"),
    "project_id": os.getenv("STORE_PROJECT_ID", "school-records-dev"),
    "public_key": os.getenv("STORE_PUBLIC_KEY", ""),
    "timeout": float(os.getenv("STORE_TIMEOUT", "15")),
    "max_retries": int(os.getenv("STORE_MAX_RETRIES", "3")),
    "retry_backoff": float(os.getenv("STORE_RETRY_BACKOFF", "0.5")),
    "page_size": int(os.getenv("STORE_PAGE_SIZE", "100")),
}

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

DEBUG = True
