"""
Errors surfaced to the HTTP caller
Each carries the status code and message used for the JSON error body
"""


class SolutionServiceError(Exception):
    """Base error with an HTTP status code"""
    status_code = 500
    default_message = "Internal Server Error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingParameter(SolutionServiceError):
    status_code = 400
    default_message = "Question ID is required"


class ResourceUnavailable(SolutionServiceError):
    status_code = 500
    default_message = "Identity resource could not be read"


class EmptyPool(SolutionServiceError):
    status_code = 500
    default_message = "No user IDs found"


class AllAttemptsExhausted(SolutionServiceError):
    """Every attempt failed; message is the last failure reason"""
    status_code = 404
    default_message = "Failed to retrieve solution."


class RenderError(SolutionServiceError):
    status_code = 500
    default_message = "Failed to render solution"
