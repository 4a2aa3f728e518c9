"""
Application error taxonomy.

Services and the LLM adapter raise these; the API layer maps them to
HTTP responses with a JSON ``{"error": message}`` body:

| Exception          | Status |
|--------------------|--------|
| ValidationError    | 400    |
| NotFoundError      | 404    |
| UpstreamError      | 400    |
| anything else      | 500    |
"""


class CareerAgentsError(Exception):
    """Base class for all application errors."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(CareerAgentsError):
    """Malformed or incomplete request data."""

    status_code = 400


class NotFoundError(CareerAgentsError):
    """Unknown identifier."""

    status_code = 404


class UpstreamError(CareerAgentsError):
    """The external LLM call failed or returned something unusable."""

    status_code = 400


class LLMTransportError(UpstreamError):
    """The provider call itself errored or timed out."""


class LLMParseError(UpstreamError):
    """The provider answered but no well-formed JSON object could be extracted."""
