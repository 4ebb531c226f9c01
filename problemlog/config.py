# ========================
# config.py
# ========================

import os

from dotenv import load_dotenv

load_dotenv()

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


# =========================
# Flask設定クラス
# =========================
class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-key")
    SQLALCHEMY_DATABASE_URI = os.getenv(
        "DATABASE_URL", "sqlite:///" + os.path.join(BASE_DIR, "database.db")
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # LeetCode GraphQL
    LEETCODE_GRAPHQL_URL = os.getenv(
        "LEETCODE_GRAPHQL_URL", "https://leetcode.com/graphql"
    )
    IMPORT_CONNECT_TIMEOUT = float(os.getenv("IMPORT_CONNECT_TIMEOUT", "5"))
    IMPORT_READ_TIMEOUT = float(os.getenv("IMPORT_READ_TIMEOUT", "15"))

    # 一覧のページング
    DEFAULT_PAGE_SIZE = int(os.getenv("DEFAULT_PAGE_SIZE", "10"))
    MAX_PAGE_SIZE = int(os.getenv("MAX_PAGE_SIZE", "100"))

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = "test-key"
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    LOG_LEVEL = "WARNING"
