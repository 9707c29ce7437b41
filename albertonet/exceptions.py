class ContentError(Exception):
    """Base class for content pipeline errors."""


class MalformedDocument(ContentError):
    """Front matter or manifest could not be parsed."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        if path:
            message = f"{path}: {message}"
        super().__init__(message)


class MissingMetadataField(ContentError):
    """A required front matter key is absent."""

    def __init__(self, field: str, slug: str | None = None):
        self.field = field
        self.slug = slug
        target = f" for post {slug}" if slug else ""
        super().__init__(f"Missing required metadata field '{field}'{target}")


class StorageTransportError(ContentError):
    """Storage call failed for a reason other than absence."""

    def __init__(
        self, path: str, cause: Exception | None = None, transient: bool = False
    ):
        self.path = path
        self.cause = cause
        self.transient = transient
        super().__init__(f"Storage failure while reading {path}: {cause}")


class MessageDeliveryError(Exception):
    """Contact message could not be handed to the email function."""
