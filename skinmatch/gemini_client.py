import google.generativeai as genai
import os
from typing import Optional

from .exceptions import InvalidAnalysisResponse, InvalidImageError, VisionProviderError
from .models import FacialAnalysis
from .parsing import decode_image, parse_analysis_response

DEFAULT_MODEL = "gemini-1.5-flash"

ANALYSIS_PROMPT = """As a beauty advisor, analyze this facial image and respond with ONLY a JSON object in this exact format (no markdown, no extra text):
{
  "skinType": "normal/combination/oily/dry",
  "concerns": ["concern1", "concern2"],
  "features": {
    "eyes": "description",
    "lips": "description",
    "cheeks": "description",
    "jawline": "description",
    "forehead": "description",
    "noseShape": "description",
    "skinTexture": "description",
    "symmetry": "description"
  },
  "recommendations": [
    {
      "category": "moisturizer/serum/cleanser",
      "productType": "specific type",
      "reason": "explanation",
      "priority": 1,
      "ingredients": ["ingredient1", "ingredient2"]
    }
  ]
}"""


class GeminiClient:
    def __init__(self, api_key: Optional[str] = None, model_name: Optional[str] = None):
        self.api_key = api_key or os.getenv("GEMINI_API_KEY")
        self.model_name = model_name or os.getenv("GEMINI_MODEL", DEFAULT_MODEL)
        if self.api_key:
            genai.configure(api_key=self.api_key)
            self.model = genai.GenerativeModel(self.model_name)
        else:
            self.model = None

    def analyze_facial_features(self, image_base64: str) -> FacialAnalysis:
        """Send the image to Gemini and validate the structured analysis it returns."""
        if not self.model:
            print("⚠️  Gemini API not configured - cannot analyze image")
            raise VisionProviderError("Gemini API not configured")

        image_bytes, mime_type = decode_image(image_base64)

        try:
            print(f"🤖 Sending {mime_type} image to {self.model_name}...")
            response = self.model.generate_content([
                ANALYSIS_PROMPT,
                {"mime_type": mime_type, "data": image_bytes},
            ])
            response_text = response.text.strip()
            print(f"📝 Gemini response length: {len(response_text)} characters")

            analysis = parse_analysis_response(response_text)
            print(f"✅ Parsed analysis with {len(analysis.recommendations)} recommendations")
            return analysis

        except (InvalidAnalysisResponse, InvalidImageError):
            raise
        except Exception as e:
            print(f"❌ Error analyzing facial features: {e}")
            raise VisionProviderError(f"Failed to analyze facial features: {e}") from e
