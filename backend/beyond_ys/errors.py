from __future__ import annotations


class CatalogError(ValueError):
    """Base class for errors raised by catalog services."""

    status_code = 400


class ValidationFailed(CatalogError):
    pass


class MissingReferenceError(CatalogError):
    def __init__(self, collection: str, ids: list[str]):
        self.collection = collection
        self.ids = ids
        super().__init__(f"Unknown {collection} id(s): {', '.join(ids)}")


class SlugTakenError(CatalogError):
    status_code = 409

    def __init__(self, slug: str):
        self.slug = slug
        self.field = "id"
        super().__init__(f"Slug '{slug}' is already taken.")


class EntityNotFoundError(CatalogError):
    status_code = 404

    def __init__(self, collection: str, entity_id: str):
        self.collection = collection
        self.entity_id = entity_id
        super().__init__(f"{collection} with id '{entity_id}' does not exist.")


class BulkImportError(CatalogError):
    def __init__(self, message: str, index: int | None = None):
        self.index = index
        super().__init__(message)


class InvalidPathError(CatalogError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Invalid path '{path}'")


class CommitError(CatalogError):
    """The store rejected or failed a batch; nothing was applied."""

    status_code = 502
