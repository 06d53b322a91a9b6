import traceback
from fastapi import HTTPException

from app.summarize.engine import ProcessingError
from app.utils.latency import ProcessingTimeout


def as_http_500(e: Exception) -> HTTPException:
    """Log exception and return a generic 500 HTTPException (no internal details leaked).
    Why available: Last resort for failures outside the summarizer's own error type."""
    traceback.print_exc()
    return HTTPException(status_code=500, detail="Internal server error")


def as_http_error(e: Exception, verb: str = "generating") -> HTTPException:
    """Map summarization failures to HTTP errors: timeout -> 504 with its message, ProcessingError -> 500 "Error <verb> summary: <message>", anything else -> generic 500.
    verb is "generating" for /summarize and "regenerating" for /regenerate."""
    if isinstance(e, ProcessingTimeout):
        return HTTPException(status_code=504, detail=str(e))
    if isinstance(e, ProcessingError):
        traceback.print_exc()
        return HTTPException(status_code=500, detail=f"Error {verb} summary: {e.message}")
    return as_http_500(e)
