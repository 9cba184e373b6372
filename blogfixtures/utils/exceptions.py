"""Error formatting helpers for the blog fixtures CLI."""

from ..exceptions import (
    BlogFixturesError,
    ConfigError,
    ExportError,
    PostNotFoundError,
    ValidationError,
)


def format_error_for_user(error: Exception, debug: bool = False) -> str:
    """Format an error message for user display.

    Args:
        error: The exception to format
        debug: Whether to include debug information

    Returns:
        Formatted error message
    """
    if isinstance(error, PostNotFoundError):
        message = f"Not found: {error.message}"
        if debug:
            message += "\nRun 'blogfixtures posts list' to see the known permalink ids"
        return message

    if isinstance(error, ExportError):
        message = f"Export error: {error.message}"
        if error.file_path:
            message += f"\nFile: {error.file_path}"
        return message

    if isinstance(error, ConfigError):
        message = f"Configuration error: {error.message}"
        source = error.details.get("source")
        if source:
            message += f"\nConfig file: {source}"
        env_vars = error.details.get("env_vars")
        if env_vars:
            message += f"\nEnvironment variables: {', '.join(env_vars)}"
        return message

    if isinstance(error, ValidationError):
        return f"Invalid input: {error.message}"

    if isinstance(error, BlogFixturesError):
        message = f"Error: {error.message}"
        if error.details and debug:
            message += f"\nDetails: {error.details}"
        return message

    # Default formatting
    if debug:
        return f"Error: {str(error)}\nType: {type(error).__name__}"
    return f"Error: {str(error)}"
