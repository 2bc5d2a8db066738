# ingredient_details_prompt.py
"""
Prompt for the ingredient detail page.
"""


def build_ingredient_details_prompt(ingredient_name: str) -> str:
    """
    Build the ingredient details prompt.

    Args:
        ingredient_name: Display name of the ingredient

    Returns:
        Complete prompt string
    """
    return (
        "You are a culinary expert and food content creator.\n"
        f"Given the ingredient name: {ingredient_name}\n\n"
        "Provide the following information:\n"
        "1. description: A concise description of what the ingredient is.\n"
        "2. usageOrPreparation: Information on how the ingredient is commonly used or prepared. "
        "If it's a processed ingredient that can be made at home (e.g., a sauce), provide a simple method. "
        "If it's a raw ingredient (e.g., flour, sugar), describe its common uses. "
        "This section should be informative and practical.\n"
        "3. youtubeVideoUrl: Optionally, suggest a relevant YouTube video URL that shows how to make or use this "
        "ingredient. Provide a full embeddable YouTube URL (e.g., https://www.youtube.com/embed/VIDEO_ID). "
        "If no specific video comes to mind or is suitable, omit this field from the JSON output.\n\n"
        "Return STRICT JSON ONLY with keys: description, usageOrPreparation, youtubeVideoUrl (optional)"
    )
