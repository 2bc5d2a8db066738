import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Config:
    """Base configuration class"""

    # Flask settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    MAX_CONTENT_LENGTH = 10 * 1024 * 1024  # 10MB per request

    # Upload settings
    ALLOWED_EXTENSIONS = {"jpg", "jpeg", "png", "webp", "gif"}

    # Google Cloud settings
    GOOGLE_CLOUD_PROJECT = os.getenv("GOOGLE_CLOUD_PROJECT")
    GOOGLE_CLOUD_LOCATION = os.getenv("GOOGLE_CLOUD_LOCATION", "global")
    GOOGLE_API_KEY = os.getenv("GOOGLE_API_KEY")

    # Model settings
    DEFAULT_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")

    # Content is always produced in this language; translations start from it
    ORIGINAL_LANGUAGE = "en"

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    @staticmethod
    def init_app(app):
        """Initialize app with configuration"""
        app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    GOOGLE_API_KEY = "test-key"


# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
