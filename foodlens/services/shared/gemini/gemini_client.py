# gemini_client.py
import os, json, re
from typing import Dict, Optional, Type, TypeVar
from google import genai
from google.genai import types
from google.genai import errors as genai_errors
from pydantic import BaseModel, ValidationError
import base64
import asyncio

from ....config.settings import Config
from ....utils.helpers import parse_data_uri
from ....utils.logging import get_logger
from ..errors import FlowError

logger = get_logger(__name__)

OutputT = TypeVar("OutputT", bound=BaseModel)

# One client per event loop: the async HTTP pool inside is bound to the loop
_clients: Dict[asyncio.AbstractEventLoop, genai.Client] = {}


def make_client(project: Optional[str], location: Optional[str]) -> genai.Client:
    api_key = os.getenv("GOOGLE_API_KEY") or Config.GOOGLE_API_KEY

    # Prioritize API key authentication for Docker containers
    if api_key:
        return genai.Client(api_key=api_key)

    # Fallback to Vertex AI if no API key is available
    if project:
        try:
            return genai.Client(vertexai=True, project=project, location=location or "global")
        except Exception as e:
            raise RuntimeError(f"Failed to initialize Vertex AI client: {e}")

    raise RuntimeError("Provide GOOGLE_API_KEY for API key authentication or GOOGLE_CLOUD_PROJECT for Vertex AI.")


def get_client() -> genai.Client:
    """Shared client for the running event loop, created on first use."""
    loop = asyncio.get_running_loop()
    # Flask runs each async view on its own loop; drop clients of finished ones
    for stale in [l for l in _clients if l.is_closed()]:
        del _clients[stale]
    client = _clients.get(loop)
    if client is None:
        client = make_client(Config.GOOGLE_CLOUD_PROJECT, Config.GOOGLE_CLOUD_LOCATION)
        _clients[loop] = client
    return client


def image_part_from_data_uri(data_uri: str) -> types.Part:
    """Inline image part for a 'data:<mime>;base64,...' photo."""
    mime, data = parse_data_uri(data_uri)
    return types.Part.from_bytes(data=data, mime_type=mime)


def extract_text_from_response(resp) -> str:
    """Return JSON/text from parts; also decode inline_data if needed."""
    try:
        for cand in (getattr(resp, "candidates", []) or []):
            content = getattr(cand, "content", None)
            if not content: continue
            for part in (getattr(content, "parts", []) or []):
                t = getattr(part, "text", None)
                if isinstance(t, str) and t.strip():
                    return t
                inline = getattr(part, "inline_data", None)
                if inline:
                    data = getattr(inline, "data", None)
                    if isinstance(data, (bytes, bytearray)):
                        return data.decode("utf-8", "ignore")
                    if isinstance(data, str):
                        try:
                            return base64.b64decode(data).decode("utf-8", "ignore")
                        except Exception:
                            return data
        top = getattr(resp, "text", None)
        return top if isinstance(top, str) else ""
    except Exception:
        return ""


def first_json_block(text) -> Dict:
    """Accept dict/str/bytes/None. Return {} on failure."""
    if isinstance(text, dict):
        return text
    if isinstance(text, (bytes, bytearray)):
        try: text = text.decode("utf-8", "ignore")
        except Exception: return {}
    if not isinstance(text, str) or not text.strip():
        return {}
    try:
        data = json.loads(text)
        return data if isinstance(data, dict) else {}
    except Exception:
        m = re.search(r"\{.*\}", text, flags=re.S)
        if m:
            try: return json.loads(m.group(0))
            except Exception: pass
        return {}


async def generate_structured(
    prompt_name: str,
    prompt: str,
    output_model: Type[OutputT],
    image_data_uri: Optional[str] = None,
    model: Optional[str] = None,
    temperature: float = 0.2,
    required: bool = True,
) -> Optional[OutputT]:
    """
    Run one schema-constrained Gemini call.

    Args:
        prompt_name: Flow name, used in logs and error messages
        prompt: Complete prompt text
        output_model: Pydantic model used both as response_schema and validator
        image_data_uri: Optional photo attached after the prompt
        model: Gemini model name (defaults to Config.DEFAULT_MODEL)
        temperature: Sampling temperature
        required: When False an empty reply yields None instead of an error

    Returns:
        Validated `output_model` instance

    Raises:
        FlowError: on API failure, empty reply or schema mismatch
    """
    parts = [types.Part.from_text(text=prompt)]
    if image_data_uri is not None:
        try:
            parts.append(image_part_from_data_uri(image_data_uri))
        except ValueError as e:
            raise FlowError(f"{prompt_name}: {e}") from e

    client = get_client()
    cfg = types.GenerateContentConfig(
        temperature=temperature,
        response_mime_type="application/json",
        response_schema=output_model,
    )
    try:
        resp = await client.aio.models.generate_content(
            model=model or Config.DEFAULT_MODEL,
            contents=[types.Content(role="user", parts=parts)],
            config=cfg,
        )
    except genai_errors.APIError as e:
        raise FlowError(f"{prompt_name}: {e}", status_code=getattr(e, "code", None)) from e

    # Structured replies are usually pre-parsed; fall back to the raw text
    parsed = getattr(resp, "parsed", None)
    if isinstance(parsed, output_model):
        return parsed
    data = first_json_block(extract_text_from_response(resp))
    if not data:
        if not required:
            logger.debug("[%s] empty reply", prompt_name)
            return None
        raise FlowError(f"{prompt_name}: model returned no structured output")

    try:
        return output_model.model_validate(data)
    except ValidationError as e:
        raise FlowError(f"{prompt_name}: output failed schema validation: {e}") from e
