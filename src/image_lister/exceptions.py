"""Custom exceptions for the image lister."""


class ImageListerError(Exception):
    """Base exception for all image-lister errors."""

    pass


class EngineConnectionError(ImageListerError):
    """Raised when unable to connect to the container engine."""

    pass


class ImageListError(ImageListerError):
    """Raised when the engine rejects an image list request."""

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class ValidationError(ImageListerError):
    """Raised when caller-supplied input is malformed."""

    pass


class ReferenceParseError(ValidationError):
    """Raised when a repository reference string cannot be parsed."""

    pass


class FilterFormatError(ValidationError):
    """Raised when a filter flag is not in name=value form."""

    pass
