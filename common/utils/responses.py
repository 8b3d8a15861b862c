"""
Response bodies shared by the routers and the exception handlers.

Failures are ``{"error": message}``; plain acknowledgements (logout,
follow toggles, deletions) are ``{"message": message}``.
"""

from typing import Dict


def error_response(message: str) -> Dict[str, str]:
    return {"error": message}


def message_response(message: str) -> Dict[str, str]:
    return {"message": message}
