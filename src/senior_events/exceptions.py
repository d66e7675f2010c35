"""Exception hierarchy for the events catalog."""


class CatalogError(Exception):
    """Base class for catalog errors."""


class DataSourceUnavailable(CatalogError):
    """The catalog document could not be retrieved (network, status, missing file)."""

    def __init__(self, source_id: str, reason: str):
        self.source_id = source_id
        self.reason = reason
        super().__init__(f"{source_id}: {reason}")


class MalformedDocument(CatalogError):
    """The catalog document was retrieved but does not have the expected shape."""

    def __init__(self, source_id: str, reason: str):
        self.source_id = source_id
        self.reason = reason
        super().__init__(f"{source_id}: malformed document ({reason})")


class MissingSurfaceTarget(CatalogError):
    """A rendering surface element expected to exist is absent."""

    def __init__(self, target_id: str):
        self.target_id = target_id
        super().__init__(f"Surface target '{target_id}' not found")
