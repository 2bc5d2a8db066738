from .gemini_client import make_client, get_client, extract_text_from_response, first_json_block, image_part_from_data_uri, generate_structured

__all__ = ["make_client", "get_client", "extract_text_from_response", "first_json_block", "image_part_from_data_uri", "generate_structured"]
