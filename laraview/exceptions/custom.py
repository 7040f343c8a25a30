"""
Custom Exception Classes
Framework-specific exceptions with HTTP status codes
"""
from typing import Optional, Sequence


class FrameworkException(Exception):
    """Base exception for all framework exceptions"""
    status_code = 500
    message = "An error occurred"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or self.__class__.message
        self.status_code = status_code or self.__class__.status_code
        super().__init__(self.message)


class ViewException(FrameworkException):
    """Base exception for view resolution and rendering failures"""
    message = "View could not be rendered"


class TemplateNotFoundException(ViewException):
    """
    Template not found exception

    Raised by an engine at render time when a resolved view path has
    no backing template.

    Example:
        raise TemplateNotFoundException('pages/home.html', ['/app/resources/views'])
    """
    status_code = 404
    message = "View not found"

    def __init__(
        self,
        template: str,
        locations: Optional[Sequence[str]] = None,
        message: Optional[str] = None,
    ):
        self.template = template
        self.locations = [str(location) for location in (locations or [])]

        if message is None:
            message = f"View [{template}] not found."
            if self.locations:
                message += f" Searched in: {', '.join(self.locations)}"

        super().__init__(message)
