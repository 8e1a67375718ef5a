"""Error message formatting for user-friendly exception handling."""


def _format_decode_error(error: UnicodeDecodeError) -> str:
    return (
        f"Input is not valid {error.encoding} text "
        f"(byte offset {error.start}).\n"
        "Only text files can be validated."
    )


# Subclasses must come before their bases; the first match wins.
ERROR_TYPES = {
    FileNotFoundError: lambda e: f"File not found: {e.filename}",
    IsADirectoryError: lambda e: f"Expected a file but got a directory: {e.filename}",
    PermissionError: lambda e: f"Permission denied: {e.filename}\nCheck file permissions.",
    UnicodeDecodeError: _format_decode_error,
    OSError: lambda e: f"System error: {e!s}",
    ValueError: lambda e: str(e),
}


def get_error_human_message(error: Exception) -> str:
    """
    Get user-friendly error message based on exception type.

    Args:
        error: The exception to format

    Returns:
        Formatted error message suitable for end users
    """
    for error_type, handler in ERROR_TYPES.items():
        if isinstance(error, error_type):
            return handler(error)
    return str(error)
