"""
Domain name generation prompt and response schema.
"""

SUGGESTION_COUNT = 10

NO_KEYWORDS = "None provided"

PROMPT = """You are a startup naming expert trained on frameworks used by successful entrepreneurs and millionaires.

Based on the following user input, suggest {count} creative, brandable, and scroll-stopping domain name ideas for their new business.

Details:
- Business Type: {business_type}
- Keywords (optional): {keywords}
- Tone/Style Preference: {tones} (e.g., funny, classy, quirky, modern, bold, professional)
- Preferred Domain Extension: {extension} (e.g., .com, .ai, .store)

Guidelines:
- Use naming techniques inspired by Greg Isenberg's framework:
    - Descriptive names (clearly explain the business's value or appeal)
    - Culturally-relevant phrases (that resonate with trends or specific communities)
    - Humorous or playful ideas (that are memorable and viral-worthy)
- Avoid generic, forgettable, or "tofu" names (bland or hard to remember).
- Follow the "telephone test": names should be easy to say, spell, and search.
- Use clever wordplay or subtle alliteration where it enhances memorability.
- At least 2 names should come with a short explanation of why they work well.
- Optionally, suggest whether a domain or social handle may be available.

Your goal is to create names that could help this product go viral and build a strong internet-first brand.

Generate exactly {count} high-quality names.

Return the response as a JSON array where each item has:
- name: the domain name (required)
- type: the category, e.g. "Descriptive", "Cultural Phrase", "Humorous", "Wordplay" (required)
- rationale: explanation of why this name works well (required)
- availability: "available", "check", or "taken" (your best guess, optional)
- telephoneTest: true/false if it passes the telephone test (optional)
- viralPotential: "Low", "Medium", "High", or "Very High" (optional)

Return ONLY the JSON array, no other text."""

# Gemini structured output schema mirroring the Suggestion wire shape
SUGGESTION_SCHEMA = {
    "type": "ARRAY",
    "items": {
        "type": "OBJECT",
        "properties": {
            "name": {"type": "STRING"},
            "type": {"type": "STRING"},
            "rationale": {"type": "STRING"},
            "availability": {"type": "STRING"},
            "telephoneTest": {"type": "BOOLEAN"},
            "viralPotential": {"type": "STRING"},
        },
        "required": ["name", "type", "rationale"],
    },
}


def join_tones(tones: list[str]) -> str:
    """Join tones into a phrase: 'bold', 'bold and modern', 'bold, modern and funny'."""
    if len(tones) <= 1:
        return "".join(tones)
    return f"{', '.join(tones[:-1])} and {tones[-1]}"
