from flask import Flask
from flask_cors import CORS
from .config.settings import Config
from .utils.helpers import slugify


def create_app(config_class=Config):
    """Application factory pattern"""
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app)

    config_class.init_app(app)

    # Ingredient links in templates
    app.add_template_filter(slugify, "slugify")

    # Register blueprints
    from .routes.pages import pages_bp
    from .routes.api import api_bp
    from .routes.health import health_bp

    app.register_blueprint(pages_bp)
    app.register_blueprint(api_bp)
    app.register_blueprint(health_bp)

    return app
