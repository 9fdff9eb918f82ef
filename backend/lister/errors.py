"""
Errors
"""


class MalformedInputError(ValueError):
    """Raised when a JSON record or CSV row cannot be parsed"""
