"""Domain errors and their HTTP mapping.

Every failure the API reports on purpose is one of the exceptions below. Each
carries a stable ``kind`` and the structured context it was raised with; the
exception handlers in ``main`` turn the kind into a status code and a public
message. Anything else is answered with a generic 500.
"""

from enum import Enum

from fastapi import status


class ErrorKind(str, Enum):
    """Machine-readable error codes returned in the ``code`` field."""

    VALIDATION = "VALIDATION"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    PROJECT_NOT_FOUND = "PROJECT_NOT_FOUND"
    PROJECT_LIMIT = "PROJECT_LIMIT"
    EMAIL_TAKEN = "EMAIL_TAKEN"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    LLM_INVALID_JSON = "LLM_INVALID_JSON"
    LLM_MISSING_FIELDS = "LLM_MISSING_FIELDS"
    UPSTREAM_FAILURE = "UPSTREAM_FAILURE"
    INTERNAL = "INTERNAL"


STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.PROJECT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.PROJECT_LIMIT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.EMAIL_TAKEN: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.LLM_INVALID_JSON: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.LLM_MISSING_FIELDS: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.UPSTREAM_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

GENERIC_FAILURE_MESSAGE = "AI generation failed"


class SiteBuilderError(Exception):
    """Base class for all domain errors."""

    kind: ErrorKind = ErrorKind.INTERNAL
    public_message: str = GENERIC_FAILURE_MESSAGE

    def __init__(self, message: str | None = None):
        super().__init__(message or self.public_message)

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND[self.kind]


class UserNotFound(SiteBuilderError):
    kind = ErrorKind.USER_NOT_FOUND
    public_message = "User not found."

    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__(f"User {user_id} not found")


class ProjectNotFound(SiteBuilderError):
    """Project is missing or owned by someone else; the two are not told apart."""

    kind = ErrorKind.PROJECT_NOT_FOUND
    public_message = "Project not found for this user."

    def __init__(self, project_id: int, user_id: int):
        self.project_id = project_id
        self.user_id = user_id
        super().__init__(f"Project {project_id} not found for user {user_id}")


class ProjectLimitReached(SiteBuilderError):
    kind = ErrorKind.PROJECT_LIMIT

    def __init__(self, user_id: int, limit: int):
        self.user_id = user_id
        self.limit = limit
        self.public_message = f"User has reached the maximum of {limit} projects."
        super().__init__(f"User {user_id} already owns {limit} projects")


class EmailAlreadyRegistered(SiteBuilderError):
    kind = ErrorKind.EMAIL_TAKEN
    public_message = "Email is already registered."

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Email {email} is already registered")


class InvalidCredentials(SiteBuilderError):
    kind = ErrorKind.INVALID_CREDENTIALS
    public_message = "Invalid email or password."


class LLMInvalidJSON(SiteBuilderError):
    """Model output could not be parsed as a JSON object.

    ``raw`` holds the full model output for server-side logs only.
    """

    kind = ErrorKind.LLM_INVALID_JSON

    def __init__(self, raw: str, fields: tuple[str, ...]):
        self.raw = raw
        self.public_message = (
            f"Model did not return valid JSON with {_quote_fields(fields)}."
        )
        super().__init__(self.public_message)


class LLMMissingFields(SiteBuilderError):
    kind = ErrorKind.LLM_MISSING_FIELDS

    def __init__(self, missing: list[str], fields: tuple[str, ...]):
        self.missing = missing
        self.public_message = (
            f"Model JSON missing {_quote_fields(fields, joiner=' or ')} string fields."
        )
        super().__init__(f"Model JSON missing string fields: {', '.join(missing)}")


class UpstreamFailure(SiteBuilderError):
    """The LLM provider call failed or returned nothing usable."""

    kind = ErrorKind.UPSTREAM_FAILURE


def _quote_fields(fields: tuple[str, ...], joiner: str = " and ") -> str:
    return joiner.join(f"'{name}'" for name in fields)
