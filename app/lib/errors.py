# app/lib/errors.py
from typing import List, Optional


class StoryApiError(Exception):
    """Base error carrying the HTTP status and the JSON body returned to the caller."""

    status_code = 500

    def __init__(self, error: str, message: str):
        super().__init__(message)
        self.error = error
        self.message = message

    def to_payload(self) -> dict:
        return {"error": self.error, "message": self.message}


class StoryValidationError(StoryApiError):
    status_code = 400


class InvalidNameError(StoryValidationError):
    def __init__(self, message: str = "Invalid name. The name must contain at least one letter (A-Z)."):
        super().__init__("Invalid name", message)


class InvalidAgeError(StoryValidationError):
    def __init__(self, message: str = "Invalid age. Age must be a whole number between 1 and 16."):
        super().__init__("Invalid age", message)


class InvalidKeywordsError(StoryValidationError):
    def __init__(self, invalid_keywords: List[str]):
        super().__init__(
            "Invalid keywords provided",
            "Please use only keywords from the available list. "
            "Use GET /keywords to see all available options.",
        )
        self.invalid_keywords = list(invalid_keywords)

    def to_payload(self) -> dict:
        payload = super().to_payload()
        payload["invalidKeywords"] = self.invalid_keywords
        return payload


class StoryGenerationError(StoryApiError):
    status_code = 500

    def __init__(self, message: Optional[str] = None):
        super().__init__("Failed to generate story", message or "Unknown error occurred")
