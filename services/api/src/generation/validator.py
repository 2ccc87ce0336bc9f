"""Validation of raw model output.

Model output is untrusted: nothing from it is used until it has been parsed
as a JSON object carrying the two string fields of the active profile.
"""

from dataclasses import dataclass
import json
import re

import structlog

from ..errors import LLMInvalidJSON, LLMMissingFields
from .profiles import Profile, response_fields

logger = structlog.get_logger()

_HEAD_CLOSE = re.compile(r"</head>", re.IGNORECASE)
_DOCTYPE = re.compile(r"<!DOCTYPE html>", re.IGNORECASE)


@dataclass(frozen=True)
class GeneratedPage:
    """Validated generation output.

    markup: HTML shown to the user (React preview, or the static page with its
        stylesheet inlined)
    code: React component source, or the raw stylesheet for the static profile
    """

    markup: str
    code: str


def _strip_code_fence(raw: str) -> str:
    """Remove a markdown code fence wrapped around the whole answer."""
    text = raw.strip()
    if text.startswith("```"):
        lines = [line for line in text.split("\n") if not line.strip().startswith("```")]
        text = "\n".join(lines)
    return text


def inline_stylesheet(html: str, css: str) -> str:
    """Embed ``css`` in ``html`` as a <style> block so the page renders styled on its own."""
    if _HEAD_CLOSE.search(html):
        return _HEAD_CLOSE.sub(lambda _: f"  <style>\n{css}\n  </style>\n</head>", html, count=1)
    return _DOCTYPE.sub(lambda _: f"<!DOCTYPE html>\n<style>\n{css}\n</style>\n", html, count=1)


def parse_page_response(raw: str, profile: Profile = "react") -> GeneratedPage:
    """Parse and validate raw model text.

    Raises:
        LLMInvalidJSON: text does not parse as JSON
        LLMMissingFields: parsed value is not an object, or a required field
            is absent or not a string
    """
    markup_field, code_field = response_fields(profile)
    fields = (code_field, markup_field)

    try:
        parsed = json.loads(_strip_code_fence(raw))
    except json.JSONDecodeError as e:
        logger.warning("llm_invalid_json", error=str(e), raw=raw)
        raise LLMInvalidJSON(raw, fields) from e

    if not isinstance(parsed, dict):
        logger.warning(
            "llm_missing_fields", missing=list(fields), json_type=type(parsed).__name__
        )
        raise LLMMissingFields(list(fields), fields)

    missing = [name for name in fields if not isinstance(parsed.get(name), str)]
    if missing:
        logger.warning("llm_missing_fields", missing=missing, keys=sorted(parsed.keys()))
        raise LLMMissingFields(missing, fields)

    markup = parsed[markup_field]
    code = parsed[code_field]
    if profile == "static":
        markup = inline_stylesheet(markup, code)

    return GeneratedPage(markup=markup, code=code)
