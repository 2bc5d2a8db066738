from flask import Blueprint, request, jsonify
from pydantic import ValidationError

from ..models.analysis import TranslationBundle
from ..services.analysis_service import analyze_image, NO_IMAGE_ERROR
from ..services.ingredient_service import get_ingredient_details, describe_fetch_error
from ..services.languages import LANGUAGES, language_code, language_options
from ..services.shared.errors import FlowError
from ..services.translation_service import translate_content
from ..utils.helpers import file_to_data_uri
from ..utils.logging import get_logger

logger = get_logger(__name__)

api_bp = Blueprint('api', __name__, url_prefix="/api")


@api_bp.post("/analyze")
async def analyze():
    """Analyze one packaging photo given as JSON {photoDataUri} or multipart 'image'"""
    upload = request.files.get("image")
    if upload and upload.filename:
        try:
            photo_data_uri = file_to_data_uri(upload)
        except ValueError as ve:
            return jsonify({"error": "bad_extension", "msg": str(ve)}), 400
    else:
        body = request.get_json(silent=True) or {}
        photo_data_uri = body.get("photoDataUri") or ""

    model = request.args.get("model")
    result = await analyze_image(photo_data_uri, model=model)

    if result.error == NO_IMAGE_ERROR:
        return jsonify(result.to_wire()), 400
    if result.error:
        return jsonify(result.to_wire()), 422
    return jsonify(result.to_wire()), 200


@api_bp.post("/translate")
async def translate():
    """
    Translate analysis display fields.
    Expects JSON: { "content": {productName, ingredients, ...}, "targetLanguage": "es" | "Spanish" }
    """
    body = request.get_json(silent=True) or {}
    target = (body.get("targetLanguage") or "").strip()
    if not target:
        return jsonify({"error": "missing_target_language", "msg": "JSON field 'targetLanguage' required"}), 400
    if language_code(target) is None:
        return jsonify({"error": "unsupported_language", "msg": f"supported: {sorted(LANGUAGES)}"}), 400

    try:
        original = TranslationBundle.model_validate(body.get("content") or {})
    except ValidationError as e:
        return jsonify({"error": "bad_content", "msg": str(e)}), 400

    translated = await translate_content(original, target)
    return jsonify(translated.to_wire()), 200


@api_bp.post("/ingredient-details")
async def ingredient_details():
    """Details for one ingredient. Expects JSON: { "ingredientName": "Olive Oil" }"""
    body = request.get_json(silent=True) or {}
    name = body.get("ingredientName")
    if not isinstance(name, str) or not name.strip():
        return jsonify({"error": "missing_ingredient_name", "msg": "JSON field 'ingredientName' required"}), 400

    try:
        detail = await get_ingredient_details(name)
    except ValueError as ve:
        return jsonify({"error": "bad_ingredient_name", "msg": str(ve)}), 400
    except FlowError as e:
        logger.exception(f'Failed to fetch ingredient details for "{name}"')
        if e.is_rate_limited:
            return jsonify({"error": "rate_limited", "msg": describe_fetch_error(e)}), 429
        return jsonify({"error": "ingredient_details_failed", "msg": describe_fetch_error(e)}), 502
    except Exception as e:
        logger.exception(f'Failed to fetch ingredient details for "{name}"')
        return jsonify({"error": "ingredient_details_failed", "msg": describe_fetch_error(e)}), 502

    return jsonify(detail.to_wire()), 200


@api_bp.get("/languages")
def languages():
    """Language options for the translation selector"""
    return jsonify({"languages": language_options()}), 200
