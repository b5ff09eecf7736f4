"""
Domain name generator service.

Collects a short business description and asks Gemini for a list of
brandable domain name ideas:
- Validates the incoming request (business type, keywords, tones, extension)
- Builds a naming prompt and requests structured JSON from Gemini
- Maps provider failures into a stable error contract for the web client
"""

__version__ = "1.0.0"
