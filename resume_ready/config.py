"""
Resume Ready Configuration
Supports AWS Parameter Store for production secrets
"""
import os
from typing import Optional

import boto3


def get_parameter(name: str, default: str = "") -> str:
    """Get parameter from environment or AWS Parameter Store"""
    # Environment variable takes precedence
    env_key = name.upper().replace("-", "_").replace("/", "_")
    if env_key in os.environ:
        return os.environ[env_key]

    if os.environ.get("USE_PARAMETER_STORE"):
        ssm = boto3.client("ssm", region_name=os.environ.get("AWS_REGION", "us-west-2"))
        path = os.environ.get("PARAMETER_STORE_PATH", "/resume-ready/prod/")
        try:
            response = ssm.get_parameter(Name=f"{path}{name}", WithDecryption=True)
        except ssm.exceptions.ParameterNotFound:
            return default
        return response["Parameter"]["Value"]

    return default


class Config:
    """Base configuration"""
    # OpenAI
    OPENAI_API_KEY = os.environ.get("OPENAI_API_KEY", "")
    OPENAI_MODEL = os.environ.get("OPENAI_MODEL", "gpt-4o-mini")
    OPENAI_MAX_TOKENS = int(os.environ.get("OPENAI_MAX_TOKENS", "2000"))
    OPENAI_TIMEOUT = float(os.environ.get("OPENAI_TIMEOUT", "60"))

    # MongoDB
    MONGODB_URI = os.environ.get("MONGODB_URI", "mongodb://localhost:27017")
    MONGODB_DB = os.environ.get("MONGODB_DB", "resume-ready")
    MONGODB_USERS_COLLECTION = os.environ.get("MONGODB_USERS_COLLECTION", "users")

    # File uploads
    MAX_CONTENT_LENGTH = int(os.environ.get("MAX_CONTENT_LENGTH", 16 * 1024 * 1024))

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # App Version
    APP_VERSION = os.environ.get("APP_VERSION", "2026.10")
    BUILD_TIME = os.environ.get("BUILD_TIME", "")
    GIT_COMMIT = os.environ.get("GIT_COMMIT", "")


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False

    # Override with Parameter Store in production
    OPENAI_API_KEY = get_parameter("openai-api-key", Config.OPENAI_API_KEY)
    MONGODB_URI = get_parameter("mongodb-uri", Config.MONGODB_URI)


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    OPENAI_API_KEY = "test-key"
    MONGODB_URI = "mongodb://localhost:27017"
    MONGODB_DB = "resume-ready-test"
    LOG_LEVEL = "DEBUG"


config = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
    "default": DevelopmentConfig,
}


def get_config(env: Optional[str] = None):
    """Get configuration class by environment name"""
    env = env or os.environ.get("FLASK_ENV", "development")
    return config.get(env, config["default"])
