"""
Shared fixtures for FoodLens tests.

Every Gemini call goes through `generate_structured`, imported by name into
each flow module. The `gemini` fixture replaces it in all of them with a
scripted fake, so no test ever reaches the network.
"""

import asyncio
import base64
import importlib
from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import pytest

from foodlens import create_app
from foodlens.config.settings import TestingConfig
from foodlens.services.shared.errors import FlowError

FLOW_MODULES = [
    "foodlens.services.flows.extract_product_name",
    "foodlens.services.flows.identify_ingredients",
    "foodlens.services.flows.extended_product_info",
    "foodlens.services.flows.suggest_recipes",
    "foodlens.services.flows.translate_text",
    "foodlens.services.flows.ingredient_details",
]


class FakeGemini:
    """
    Scripted stand-in for `generate_structured`.

    A reply per flow name can be:
      - a dict (validated into the flow's output model)
      - an Exception instance (raised)
      - a callable taking the prompt and returning either of the above
      - None (empty reply)
    """

    def __init__(self):
        self.replies: Dict[str, Any] = {}
        self.delays: Dict[str, float] = {}
        self.calls: List[SimpleNamespace] = []
        self.events: List[tuple] = []

    def reply(self, flow: str, value: Any, delay: float = 0.0) -> "FakeGemini":
        self.replies[flow] = value
        self.delays[flow] = delay
        return self

    def calls_to(self, flow: str) -> List[SimpleNamespace]:
        return [c for c in self.calls if c.flow == flow]

    async def __call__(
        self,
        prompt_name: str,
        prompt: str,
        output_model,
        image_data_uri: Optional[str] = None,
        model: Optional[str] = None,
        temperature: float = 0.2,
        required: bool = True,
    ):
        self.calls.append(SimpleNamespace(flow=prompt_name, prompt=prompt, image=image_data_uri, model=model))
        self.events.append(("start", prompt_name))
        await asyncio.sleep(self.delays.get(prompt_name, 0.0))
        self.events.append(("end", prompt_name))

        reply = self.replies.get(prompt_name)
        if callable(reply):
            reply = reply(prompt)
        if isinstance(reply, Exception):
            raise reply
        if reply is None:
            if not required:
                return None
            raise FlowError(f"{prompt_name}: model returned no structured output")
        return output_model.model_validate(reply)


@pytest.fixture
def gemini(monkeypatch) -> FakeGemini:
    """Fake Gemini patched into every flow module."""
    fake = FakeGemini()
    for name in FLOW_MODULES:
        monkeypatch.setattr(importlib.import_module(name), "generate_structured", fake)
    return fake


@pytest.fixture
def photo_data_uri() -> str:
    """A tiny (not necessarily valid) PNG as a data URI."""
    return "data:image/png;base64," + base64.b64encode(b"\x89PNG\r\n\x1a\nfake").decode("ascii")


@pytest.fixture
def granola(gemini) -> FakeGemini:
    """Happy-path replies for an 'Organic Granola' packaging photo."""
    gemini.reply("extractProductName", {"productName": "Organic Granola"})
    gemini.reply("identifyIngredients", {"ingredients": ["Oats", "Honey", "Almonds"]})
    gemini.reply("getExtendedProductInfo", {
        "estimatedNutritionalInfo": "AI-estimated based on ingredients: roughly 450 kcal per 100g. This is an approximation.",
        "potentialAllergens": ["Contains tree nuts (almonds)"],
        "dietaryNotes": ["Not vegan (contains honey)"],
    })
    gemini.reply("suggestRecipes", {"recipes": [{
        "recipeName": "Granola Parfait",
        "description": "Layers of yogurt, fruit and granola.",
        "ingredientsList": ["Organic Granola", "Yogurt", "Berries"],
        "instructions": "Spoon yogurt into a glass.\nAdd berries.\nTop with granola.",
        "estimatedPrepTime": "5 minutes",
        "difficulty": "Easy",
    }]})
    return gemini


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    yield app


@pytest.fixture
def client(app):
    return app.test_client()
