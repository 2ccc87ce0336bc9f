"""Generation profiles.

A deployment runs one profile. It decides what the model is asked for and
which JSON fields the response must carry:

- react: a React + Tailwind component plus a standalone HTML preview
- static: a plain HTML5 page plus a separate stylesheet
"""

from typing import Literal

Profile = Literal["react", "static"]

# (markup field, code field) expected in the model's JSON object
RESPONSE_FIELDS: dict[str, tuple[str, str]] = {
    "react": ("previewHtml", "reactComponent"),
    "static": ("html", "css"),
}


def response_fields(profile: Profile) -> tuple[str, str]:
    """Return the (markup, code) field names required for ``profile``."""
    try:
        return RESPONSE_FIELDS[profile]
    except KeyError:
        raise ValueError(
            f"Unknown generation profile: {profile}. Supported profiles: react, static"
        ) from None
