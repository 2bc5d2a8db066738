from flask import Blueprint, request, render_template_string
from pydantic import ValidationError

from ..config.settings import Config
from ..services.ingredient_service import load_ingredient_page
from ..models.analysis import AnalysisResult
from ..services.languages import language_options
from ..ui.controller import ViewController
from ..ui.display import build_display
from ..ui.state import FieldStatus, Phase, ViewState
from ..utils.helpers import file_to_data_uri

pages_bp = Blueprint('pages', __name__)

INDEX_HTML = """<!doctype html>
<html>
  <head><meta charset="utf-8"><title>FoodLens</title></head>
  <body style="font-family: system-ui, -apple-system, Segoe UI, Roboto, Arial, sans-serif; padding: 24px; max-width: 760px; margin: auto">
    <h1>FoodLens</h1>
    <p style="color:#666">Upload an image of food packaging to analyze its contents.</p>
    <form method="POST" action="/" enctype="multipart/form-data" style="border:1px solid #eee; padding:16px; border-radius:10px">
      <div><input type="file" name="image" accept="image/*" required></div>
      <div style="margin-top:8px">Language:
        <select name="language">
          {% for lang in languages %}
          <option value="{{ lang.code }}" {% if lang.code == state.language %}selected{% endif %}>{{ lang.name }}</option>
          {% endfor %}
        </select>
      </div>
      <div style="margin-top:8px"><button type="submit">Analyze</button></div>
    </form>

    {% if state.error %}
    <div style="margin-top:16px; padding:12px; border:1px solid #e66; color:#a00; border-radius:8px">
      <strong>Analysis Failed</strong><p>{{ state.error }}</p>
    </div>
    {% endif %}
    {% if state.notification %}
    <p style="margin-top:16px; color:#a60">{{ state.notification }}</p>
    {% endif %}

    {% if restore_json %}
    <form method="POST" action="/translate" style="margin-top:16px">
      <input type="hidden" name="result" value="{{ restore_json }}">
      Show results in:
      <select name="language">
        {% for lang in languages %}
        <option value="{{ lang.code }}" {% if lang.code == state.language %}selected{% endif %}>{{ lang.name }}</option>
        {% endfor %}
      </select>
      <button type="submit">Translate</button>
    </form>
    {% endif %}

    {% set f = display %}
    {% if f.product_name %}
    <h2>{{ f.product_name.empty_message if f.product_name.is_empty else f.product_name.value }}</h2>
    {% endif %}
    {% if f.ingredients %}
    <h3>Ingredients</h3>
      {% if f.ingredients.is_empty %}<p>{{ f.ingredients.empty_message }}</p>{% else %}
      <ol>{% for ing in f.ingredients.value %}<li><a href="/ingredient/{{ original_ingredients[loop.index0]|slugify }}">{{ ing }}</a></li>{% endfor %}</ol>
      {% endif %}
    {% endif %}
    {% if f.estimated_nutritional_info %}
    <h3>Estimated Nutrition</h3>
    <p>{{ f.estimated_nutritional_info.empty_message if f.estimated_nutritional_info.is_empty else f.estimated_nutritional_info.value }}</p>
    {% endif %}
    {% for key, title in [("potential_allergens", "Potential Allergens"), ("dietary_notes", "Dietary Notes")] %}
      {% if f[key] %}
      <h3>{{ title }}</h3>
        {% if f[key].is_empty %}<p>{{ f[key].empty_message }}</p>{% else %}
        <ul>{% for item in f[key].value %}<li>{{ item }}</li>{% endfor %}</ul>
        {% endif %}
      {% endif %}
    {% endfor %}
    {% if f.recipes %}
    <h3>Recipe Ideas</h3>
      {% if f.recipes.is_empty %}<p>{{ f.recipes.empty_message }}</p>{% else %}
      {% for r in f.recipes.value %}
      <div style="border:1px solid #eee; padding:12px; border-radius:8px; margin-bottom:8px">
        <h4>{{ r.recipe_name }}</h4>
        <p>{{ r.description }}</p>
        {% if r.estimated_prep_time or r.difficulty %}<p style="color:#666">{{ r.estimated_prep_time or "" }} {{ r.difficulty or "" }}</p>{% endif %}
        <ul>{% for i in r.ingredients_list %}<li>{{ i }}</li>{% endfor %}</ul>
        <ol>{% for step in r.steps %}<li>{{ step }}</li>{% endfor %}</ol>
      </div>
      {% endfor %}
      {% endif %}
    {% endif %}
  </body>
</html>"""

INGREDIENT_HTML = """<!doctype html>
<html>
  <head><meta charset="utf-8"><title>About {{ page.ingredient_name }} | FoodLens</title></head>
  <body style="font-family: system-ui, -apple-system, Segoe UI, Roboto, Arial, sans-serif; padding: 24px; max-width: 760px; margin: auto">
    <a href="/">&lsaquo; Back to FoodLens</a>
    <h1>About: {{ page.ingredient_name }}</h1>
    {% if page.fetch_error %}
    <div style="padding:12px; border:1px solid #e66; color:#a00; border-radius:8px">
      <strong>Failed to Load Details</strong><p>{{ page.fetch_error }}</p>
    </div>
    {% endif %}
    {% if page.detail %}
    <h2>What is {{ page.ingredient_name }}?</h2>
    {% for para in page.detail.description.split("\\n") if para.strip() %}<p>{{ para }}</p>{% endfor %}
    <h2>Usage &amp; Preparation</h2>
    {% for para in page.detail.usage_or_preparation.split("\\n") if para.strip() %}<p>{{ para }}</p>{% endfor %}
    {% if page.detail.youtube_video_url %}
    <h2>Watch a Video</h2>
    <iframe width="100%" height="400" src="{{ page.detail.youtube_video_url }}" title="YouTube video for {{ page.ingredient_name }}"
            frameborder="0" allow="accelerometer; autoplay; clipboard-write; encrypted-media; gyroscope; picture-in-picture; web-share" allowfullscreen></iframe>
    {% else %}
    <p style="color:#666"><em>No video is currently available for this ingredient.</em></p>
    {% endif %}
    {% endif %}
  </body>
</html>"""


def _restore_json(state: ViewState) -> str:
    """Original-language results as JSON, posted back by the translate form."""
    if state.original is None:
        return ""
    recipes = list(state.recipes.value) if state.recipes.status is FieldStatus.POPULATED else []
    result = AnalysisResult(**state.original.model_dump(), recipes=recipes)
    return result.model_dump_json(by_alias=True, exclude_none=True)


def _render_index(state: ViewState, status: int = 200):
    original = state.original.ingredients if state.original and state.original.ingredients else []
    return render_template_string(
        INDEX_HTML,
        state=state,
        display=build_display(state),
        languages=language_options(),
        # links always use the original-language name
        original_ingredients=original,
        restore_json=_restore_json(state),
    ), status


@pages_bp.get("/")
def index():
    """Main upload page"""
    return _render_index(ViewState())


@pages_bp.post("/")
async def analyze_page():
    """Analyze an uploaded photo and render the results, translated if a language was picked."""
    upload = request.files.get("image")
    controller = ViewController()

    image_data = None
    if upload and upload.filename:
        try:
            image_data = file_to_data_uri(upload)
        except ValueError:
            state = ViewState(phase=Phase.FAILED, error=f"Unsupported image type: {upload.filename}")
            return _render_index(state, 400)

    controller.select_image(image_data)
    state = await controller.submit()

    # unsupported or original-language choices leave the results as they are
    language = request.form.get("language") or Config.ORIGINAL_LANGUAGE
    if state.phase is Phase.READY:
        state = await controller.change_language(language)

    if state.phase is Phase.FAILED:
        return _render_index(state, 400 if image_data is None else 422)
    return _render_index(state)


@pages_bp.post("/translate")
async def translate_page():
    """Show the results already on the page in another language, without re-analyzing."""
    try:
        result = AnalysisResult.model_validate_json(request.form.get("result") or "")
    except ValidationError:
        state = ViewState(phase=Phase.FAILED, error="Nothing to translate. Please analyze an image first.")
        return _render_index(state, 400)

    controller = ViewController()
    controller.restore(result)
    state = await controller.change_language(request.form.get("language") or Config.ORIGINAL_LANGUAGE)
    return _render_index(state)


@pages_bp.get("/ingredient/<path:slug>")
async def ingredient_page(slug: str):
    """Ingredient detail page"""
    page = await load_ingredient_page(slug)
    status = 200
    if page.rate_limited:
        status = 429
    elif page.fetch_error:
        status = 502 if page.ingredient_name.strip() else 400
    return render_template_string(INGREDIENT_HTML, page=page), status
