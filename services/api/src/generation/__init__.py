"""Page generation: prompt templates, output validation and the pipeline."""

from .locks import UserLocks
from .profiles import Profile
from .prompts import PagePrompt, build_prompt
from .service import GenerationResult, GenerationService
from .validator import GeneratedPage, parse_page_response

__all__ = [
    "GeneratedPage",
    "GenerationResult",
    "GenerationService",
    "PagePrompt",
    "Profile",
    "UserLocks",
    "build_prompt",
    "parse_page_response",
]
