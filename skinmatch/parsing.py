import base64
import binascii
import json
import re
from typing import Any, Dict, Tuple

from pydantic import ValidationError

from .exceptions import InvalidAnalysisResponse, InvalidImageError
from .models import FacialAnalysis

_CODE_FENCE = re.compile(r"```(?:json)?")
_JSON_OBJECT = re.compile(r"\{[\s\S]*\}")
_DATA_URL = re.compile(r"^data:[^;,]*;base64,", re.IGNORECASE)

_IMAGE_SIGNATURES = (
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"\x89PNG\r\n\x1a\n", "image/png"),
)


def extract_json(text: str) -> Dict[str, Any]:
    """Pull the JSON object out of a model reply, ignoring markdown wrapping."""
    if not text:
        raise InvalidAnalysisResponse("Empty response from vision provider")

    cleaned = _CODE_FENCE.sub("", text)
    match = _JSON_OBJECT.search(cleaned)
    if not match:
        raise InvalidAnalysisResponse("Could not find valid JSON in response")

    try:
        data = json.loads(match.group())
    except json.JSONDecodeError as e:
        raise InvalidAnalysisResponse(f"Invalid JSON in response: {e.msg}") from e

    if not isinstance(data, dict):
        raise InvalidAnalysisResponse("Response JSON must be an object")
    return data


def _describe_errors(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        location = ".".join(str(part) for part in err["loc"]) or "response"
        parts.append(f"{location}: {err['msg']}")
    return "; ".join(parts)


def parse_analysis_response(text: str) -> FacialAnalysis:
    """Validate a raw vision reply into a ``FacialAnalysis``."""
    data = extract_json(text)
    try:
        return FacialAnalysis.model_validate(data)
    except ValidationError as e:
        raise InvalidAnalysisResponse(f"Invalid response format: {_describe_errors(e)}") from e


def decode_image(image: str) -> Tuple[bytes, str]:
    """
    Decode a base64 image, optionally given as a data URL.

    Returns the raw bytes and the MIME type detected from the file signature.
    Only JPEG and PNG are accepted.
    """
    if not image or not image.strip():
        raise InvalidImageError("Image is required")

    payload = "".join(_DATA_URL.sub("", image.strip()).split())
    try:
        data = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidImageError("Image must be base64 encoded") from e

    for signature, mime_type in _IMAGE_SIGNATURES:
        if data.startswith(signature):
            return data, mime_type
    raise InvalidImageError("Image must be a JPEG or PNG")


def to_data_url(data: bytes, mime_type: str) -> str:
    return f"data:{mime_type};base64,{base64.b64encode(data).decode('ascii')}"
