import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    # Database
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///quizbot.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Flask
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # JWT
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "dev-jwt-secret")

    # LLM Wrapper (any OpenAI-compatible chat completions endpoint)
    WRAPPER_BASE_URL = os.getenv("WRAPPER_BASE_URL", "https://api.groq.com/openai/v1")
    WRAPPER_KEY = os.getenv("WRAPPER_KEY", "")
    WRAPPER_TIMEOUT = float(os.getenv("WRAPPER_TIMEOUT", "60"))

    # Quiz generation
    QUIZ_MODEL = os.getenv("QUIZ_MODEL", "qwen/qwen3-32b")
    RECENT_QUIZ_LIMIT = 30


class DevelopmentConfig(Config):
    DEBUG = True
    PROPAGATE_EXCEPTIONS = True


class ProductionConfig(Config):
    DEBUG = False


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    JWT_SECRET_KEY = "test-jwt-secret-with-enough-length-for-hs256"
    WRAPPER_BASE_URL = "http://wrapper.test/v1"
    WRAPPER_KEY = "test-key"


config_map = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
    "default": DevelopmentConfig,
}
