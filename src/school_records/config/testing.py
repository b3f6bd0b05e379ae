import os

SECRET_KEY = "test-secret"

STORE_CONFIG = {
    "base_url": os.getenv("STORE_BASE_URL", "http://store.test/api/v1"),
    "project_id": "school-records-test",
    "public_key": "test-key",
    "timeout": 2.0,
    "max_retries": 0,
    "retry_backoff": 0.0,
    "page_size": 100,
}

LOG_LEVEL = "WARNING"

DEBUG = False
TESTING = True
