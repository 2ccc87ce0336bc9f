"""Prompt templates for page generation.

The instruction text pins the model to a JSON-only answer with exactly the two
fields of the active profile. That is a request, not a guarantee, so the
validator still checks every response.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from .profiles import Profile, response_fields

REACT_INSTRUCTIONS = """You are a senior product designer and front-end developer.
You generate a single React page component styled with Tailwind CSS, plus a
standalone HTML preview of the same page.

Return ONLY a valid JSON object with exactly two string fields:
{
    "reactComponent": "<React component source>",
    "previewHtml": "<complete HTML document>"
}
No markdown, no backticks, no explanations, no extra fields.

REACT COMPONENT REQUIREMENTS:
- A single file exporting the page as `export default function ...`.
- Functional component, no external imports besides React.
- Style exclusively with Tailwind utility classes.
- Use semantic elements: header, main, section, nav, footer.

PREVIEW HTML REQUIREMENTS:
- A complete document with <!DOCTYPE html>, <html>, <head> and <body>.
- Load Tailwind from its CDN script so the preview renders without a build step.
- Render the same layout and copy as the React component, written as static HTML.

VISUAL STYLE REQUIREMENTS:
- Modern, premium SaaS-like aesthetic with a clear visual hierarchy:
  big hero section, bold headline, subcopy, primary call to action.
- Plenty of white space, rounded corners, soft shadows, subtle hover states.
- Fully responsive layout using flexbox and grid utilities."""

STATIC_INSTRUCTIONS = """You are a senior product designer and front-end developer.
You generate a COMPLETE HTML5 page plus a separate CSS stylesheet.

Return ONLY a valid JSON object with exactly two string fields: "html" and "css".
No markdown, no backticks, no explanations, no comments.

VISUAL STYLE REQUIREMENTS:
- Modern, premium SaaS-like aesthetic.
- Use a clear visual hierarchy: big hero section, bold headline, subcopy, primary CTA.
- Use CSS variables for the color palette (:root { --bg: ...; --accent: ...; }).
- Use a soft gradient or subtle background for the main page (no harsh colors).
- Use plenty of white space, rounded corners, and soft box-shadows.
- Use a clean, system-safe font stack (e.g., system-ui, -apple-system, "Segoe UI", sans-serif).
- Add hover states for buttons and cards (transform: translateY(-2px); box-shadow changes).
- Add small transitions (transition: all 180ms ease-out).
- Layouts should be fully responsive using flexbox and CSS grid.

HTML REQUIREMENTS:
- The html MUST reference the stylesheet with <link rel="stylesheet" href="styles.css"> inside <head>.
- Use semantic elements: <header>, <main>, <section>, <nav>, <footer>.
- Include a hero section and at least one content section with cards or feature blocks.

CSS REQUIREMENTS:
- The css must be valid standalone CSS and must start with rules for the html element.
- Define a color system using :root variables.
- Implement responsive layout with @media queries.
- No CSS comments.

GENERAL RESTRICTIONS:
- Do NOT include any <script> tag.
- Do NOT include any external network requests (no remote fonts, no CDNs)."""

INSTRUCTIONS: dict[str, str] = {
    "react": REACT_INSTRUCTIONS,
    "static": STATIC_INSTRUCTIONS,
}

PAGE_REQUIREMENTS = """Additional requirements:
- The HTML must include <!DOCTYPE html>, <html>, <head>, and <body>.
- Use only relative paths for referenced assets.
- Design should feel cohesive and well thought out, not like a basic boilerplate.
- Prefer a centered layout with comfortable max-width for content."""


@dataclass(frozen=True)
class PagePrompt:
    """Instruction/message pair sent to the model."""

    instructions: str
    message: str


def build_instructions(profile: Profile) -> str:
    """Return the fixed instruction text for ``profile``."""
    response_fields(profile)  # rejects unknown profiles
    return INSTRUCTIONS[profile]


def _format_history(history: Sequence[str]) -> str:
    # history arrives newest first; the model reads it in the order it was written
    lines = [f"{i}. {text}" for i, text in enumerate(reversed(history), start=1)]
    return "\n".join(lines)


def build_user_message(prompt: str, history: Sequence[str] = ()) -> str:
    """Compose the user message for a page description.

    Args:
        prompt: Free-text description of the page.
        history: Earlier prompts for the same project, newest first.

    Returns:
        Message text. Earlier prompts, when present, are listed oldest first
        so the model can treat the new description as a refinement.
    """
    parts = [
        "Create a visually polished, responsive single-page website based on this description:",
        prompt.strip(),
    ]
    if history:
        parts += [
            "",
            "This page already exists. Earlier requests for it, oldest first:",
            _format_history(history),
            "",
            "Apply the new description as a change to that page, keeping what it does not mention.",
        ]
    parts += ["", PAGE_REQUIREMENTS]
    return "\n".join(parts)


def build_prompt(prompt: str, history: Sequence[str] = (), profile: Profile = "react") -> PagePrompt:
    """Build the full instruction/message pair for one generation call."""
    return PagePrompt(
        instructions=build_instructions(profile),
        message=build_user_message(prompt, history),
    )
