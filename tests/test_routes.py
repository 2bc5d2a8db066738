"""HTTP tests for the JSON API, HTML pages and health check."""

import io
import json

from foodlens.services.ingredient_service import RATE_LIMITED_MESSAGE
from foodlens.services.shared.errors import FlowError


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.get_json()["ok"] is True


def test_languages(client):
    res = client.get("/api/languages")
    codes = [lang["code"] for lang in res.get_json()["languages"]]
    assert codes[0] == "en"
    assert "es" in codes


class TestAnalyzeApi:
    def test_json_photo(self, client, granola, photo_data_uri):
        res = client.post("/api/analyze", json={"photoDataUri": photo_data_uri})

        assert res.status_code == 200
        body = res.get_json()
        assert body["productName"] == "Organic Granola"
        assert body["ingredients"] == ["Oats", "Honey", "Almonds"]
        assert body["recipes"][0]["recipeName"] == "Granola Parfait"
        assert "error" not in body

    def test_multipart_upload(self, client, granola):
        data = {"image": (io.BytesIO(b"\x89PNGfake"), "label.png")}
        res = client.post("/api/analyze", data=data, content_type="multipart/form-data")

        assert res.status_code == 200
        assert granola.calls_to("extractProductName")[0].image.startswith("data:image/png;base64,")

    def test_missing_image(self, client, gemini):
        res = client.post("/api/analyze", json={})

        assert res.status_code == 400
        assert res.get_json() == {"error": "No image data provided."}
        assert gemini.calls == []

    def test_bad_extension(self, client, gemini):
        data = {"image": (io.BytesIO(b"%PDF"), "label.pdf")}
        res = client.post("/api/analyze", data=data, content_type="multipart/form-data")

        assert res.status_code == 400
        assert res.get_json()["error"] == "bad_extension"

    def test_analysis_failure(self, client, granola, photo_data_uri):
        granola.reply("extractProductName", FlowError("extractProductName: 500 INTERNAL"))

        res = client.post("/api/analyze", json={"photoDataUri": photo_data_uri})

        assert res.status_code == 422
        assert res.get_json() == {"error": "Analysis failed: extractProductName: 500 INTERNAL"}


class TestTranslateApi:
    def test_translates_content(self, client, gemini):
        gemini.reply("translateText", lambda prompt: {"translatedText": "Azúcar"})

        res = client.post("/api/translate", json={
            "content": {"productName": "Sugar", "ingredients": ["Sugar"]},
            "targetLanguage": "es",
        })

        assert res.status_code == 200
        assert res.get_json() == {"productName": "Azúcar", "ingredients": ["Azúcar"]}

    def test_original_language_is_echoed(self, client, gemini):
        content = {"productName": "Sugar", "dietaryNotes": ["Vegan"]}
        res = client.post("/api/translate", json={"content": content, "targetLanguage": "English"})

        assert res.get_json() == content
        assert gemini.calls == []

    def test_failure_returns_original(self, client, gemini):
        gemini.reply("translateText", FlowError("translateText: 503"))
        content = {"productName": "Sugar", "ingredients": ["Sugar", "Salt"]}

        res = client.post("/api/translate", json={"content": content, "targetLanguage": "fr"})

        assert res.status_code == 200
        assert res.get_json() == content

    def test_missing_language(self, client):
        res = client.post("/api/translate", json={"content": {}})
        assert res.status_code == 400
        assert res.get_json()["error"] == "missing_target_language"

    def test_unsupported_language(self, client):
        res = client.post("/api/translate", json={"content": {}, "targetLanguage": "xx"})
        assert res.status_code == 400
        assert res.get_json()["error"] == "unsupported_language"

    def test_bad_content(self, client):
        res = client.post("/api/translate", json={"content": {"ingredients": "not a list"}, "targetLanguage": "es"})
        assert res.status_code == 400
        assert res.get_json()["error"] == "bad_content"


class TestIngredientDetailsApi:
    def test_details(self, client, gemini):
        gemini.reply("getIngredientDetails", {"description": "Rolled oats.", "usageOrPreparation": "Porridge."})

        res = client.post("/api/ingredient-details", json={"ingredientName": "Oats"})

        assert res.status_code == 200
        assert res.get_json() == {"description": "Rolled oats.", "usageOrPreparation": "Porridge."}

    def test_missing_name(self, client, gemini):
        res = client.post("/api/ingredient-details", json={"ingredientName": "  "})
        assert res.status_code == 400
        assert gemini.calls == []

    def test_rate_limited(self, client, gemini):
        gemini.reply("getIngredientDetails", FlowError("getIngredientDetails: 429 RESOURCE_EXHAUSTED", status_code=429))

        res = client.post("/api/ingredient-details", json={"ingredientName": "Oats"})

        assert res.status_code == 429
        assert res.get_json()["msg"] == RATE_LIMITED_MESSAGE

    def test_upstream_failure(self, client, gemini):
        gemini.reply("getIngredientDetails", FlowError("getIngredientDetails: 500 INTERNAL"))

        res = client.post("/api/ingredient-details", json={"ingredientName": "Oats"})

        assert res.status_code == 502
        assert res.get_json()["error"] == "ingredient_details_failed"


class TestPages:
    def test_index(self, client):
        res = client.get("/")
        assert res.status_code == 200
        assert b"Upload an image of food packaging" in res.data

    def test_analyze_form(self, client, granola):
        data = {"image": (io.BytesIO(b"\x89PNGfake"), "label.png"), "language": "en"}
        res = client.post("/", data=data, content_type="multipart/form-data")

        assert res.status_code == 200
        html = res.get_data(as_text=True)
        assert "Organic Granola" in html
        assert 'href="/ingredient/oats"' in html
        assert "Granola Parfait" in html
        assert "No specific dietary notes" not in html

    def test_analyze_form_translates_but_links_original_names(self, client, granola):
        granola.reply("translateText", lambda prompt: {"translatedText": "ES:" + prompt.split("Text:\n", 1)[1]})
        data = {"image": (io.BytesIO(b"\x89PNGfake"), "label.png"), "language": "es"}

        res = client.post("/", data=data, content_type="multipart/form-data")

        html = res.get_data(as_text=True)
        assert "ES:Organic Granola" in html
        assert '<a href="/ingredient/honey">ES:Honey</a>' in html

    def test_results_page_offers_translate_form(self, client, granola):
        data = {"image": (io.BytesIO(b"\x89PNGfake"), "label.png")}
        html = client.post("/", data=data, content_type="multipart/form-data").get_data(as_text=True)

        assert 'action="/translate"' in html
        assert 'name="result"' in html

    def test_translate_form_reuses_posted_results(self, client, gemini):
        gemini.reply("translateText", lambda prompt: {"translatedText": "ES:" + prompt.split("Text:\n", 1)[1]})
        result = {
            "productName": "Organic Granola",
            "ingredients": ["Oats", "Honey"],
            "recipes": [{"recipeName": "Parfait", "description": "Layered.", "instructions": "Layer."}],
        }

        res = client.post("/translate", data={"result": json.dumps(result), "language": "Spanish"})

        assert res.status_code == 200
        html = res.get_data(as_text=True)
        assert "ES:Organic Granola" in html
        assert '<a href="/ingredient/oats">ES:Oats</a>' in html
        assert "Parfait" in html
        assert {c.flow for c in gemini.calls} == {"translateText"}

    def test_translate_form_without_results(self, client, gemini):
        res = client.post("/translate", data={"language": "es"})

        assert res.status_code == 400
        assert "Nothing to translate" in res.get_data(as_text=True)
        assert gemini.calls == []

    def test_analyze_form_without_image(self, client, gemini):
        res = client.post("/", data={}, content_type="multipart/form-data")

        assert res.status_code == 400
        assert "Please select an image first." in res.get_data(as_text=True)
        assert gemini.calls == []

    def test_analyze_form_failure(self, client, granola):
        granola.reply("identifyIngredients", FlowError("identifyIngredients: 500 INTERNAL"))
        data = {"image": (io.BytesIO(b"\x89PNGfake"), "label.png")}

        res = client.post("/", data=data, content_type="multipart/form-data")

        assert res.status_code == 422
        assert "Analysis failed: identifyIngredients: 500 INTERNAL" in res.get_data(as_text=True)

    def test_ingredient_page(self, client, gemini):
        gemini.reply("getIngredientDetails", {
            "description": "A fat pressed from olives.\nRich in oleic acid.",
            "usageOrPreparation": "Dressings.",
        })

        res = client.get("/ingredient/extra-virgin-olive-oil")

        assert res.status_code == 200
        html = res.get_data(as_text=True)
        assert "About: Extra Virgin Olive Oil" in html
        assert "<p>Rich in oleic acid.</p>" in html
        assert "No video is currently available" in html

    def test_ingredient_page_rate_limited(self, client, gemini):
        gemini.reply("getIngredientDetails", FlowError("quota", status_code=429))

        res = client.get("/ingredient/olive-oil")

        assert res.status_code == 429
        assert "high demand" in res.get_data(as_text=True)
