"""Infrastructure layer errors."""

from gallery.domain.error import UploadFailedError


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError):
    """External provider error."""

    pass


class ImageHostError(ProviderError, UploadFailedError):
    """Image host rejected the upload or could not be reached.

    Subclasses UploadFailedError so use cases can handle it without
    depending on the adapter layer.
    """

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)
