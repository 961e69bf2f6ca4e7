import os

SECRET_KEY = os.environ.get("SECRET_KEY", "development")

SENTRY_DSN = os.environ.get("SENTRY_DSN", "")

DB_NAME = os.environ.get("DB_NAME", "recraft")
DB_USER = os.environ.get("DB_USER", "")
DB_PASS = os.environ.get("DB_PASS", "")
DB_HOST = os.environ.get("DB_HOST", "")
DB_PORT = os.environ.get("DB_PORT", "5432")

BRIDGE_PROJECT_ID = os.environ.get("BRIDGE_PROJECT_ID", "")

# Signing key of the buyer wallet used by the `purchase_product` command
BUYER_PRIVATE_KEY = os.environ.get("BUYER_PRIVATE_KEY", "")
