# product_name_prompt.py
"""
Prompt for reading the product name off a packaging photo.
"""

PRODUCT_NAME_PROMPT = (
    "You are an expert in food product recognition.\n\n"
    "You will be provided with an image of food packaging. Your task is to identify the product name from the image.\n\n"
    "Analyze the image and extract the product name as accurately as possible.\n"
    "If no product name is legible, return an empty string for productName.\n"
    "Return STRICT JSON ONLY: {\"productName\": \"<name>\"}"
)


def build_product_name_prompt() -> str:
    """
    Build the product name extraction prompt.

    Returns:
        Complete prompt string (the image is attached as a separate part)
    """
    return PRODUCT_NAME_PROMPT
