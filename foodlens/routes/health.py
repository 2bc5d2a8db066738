from flask import Blueprint, current_app

health_bp = Blueprint('health', __name__)


@health_bp.get("/health")
def health():
    """Health check endpoint"""
    return {"ok": True, "model": current_app.config["DEFAULT_MODEL"]}, 200
