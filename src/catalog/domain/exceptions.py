"""Domain-level exceptions.

Every failure the catalog can report is a subclass of CatalogError, grouped
under one base per component. The set is closed: the transport layer maps
each concrete class to a status code, and the lifecycle manager decides per
base class whether a failure is fatal to the enclosing mutation.
"""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for all catalog errors."""

    code = "CATALOG_ERROR"


# --- Product repository -------------------------------------------------------


class RepositoryError(CatalogError):
    """The record store rejected an operation."""

    code = "REPOSITORY_ERROR"


class ProductNotFound(RepositoryError):
    """A well-formed product id that does not exist."""

    code = "PRODUCT_NOT_FOUND"

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product '{product_id}' does not exist")
        self.product_id = product_id


class InvalidId(RepositoryError):
    """An id that is not a well-formed identifier for the record store."""

    code = "INVALID_ID"

    def __init__(self, product_id: str) -> None:
        super().__init__(f"'{product_id}' is not a valid product id")
        self.product_id = product_id


# --- Asset store --------------------------------------------------------------


class AssetStoreError(CatalogError):
    """The binary-object store failed."""

    code = "ASSET_STORE_ERROR"


class StoreUnavailable(AssetStoreError):
    code = "STORE_UNAVAILABLE"


class ObjectNotFound(AssetStoreError):
    code = "OBJECT_NOT_FOUND"

    def __init__(self, key: str) -> None:
        super().__init__(f"Stored object '{key}' does not exist")
        self.key = key


class PartialDeleteFailure(AssetStoreError):
    """Some objects of a namespace could not be deleted.

    The other objects of the namespace were still deleted.
    """

    code = "PARTIAL_DELETE_FAILURE"

    def __init__(self, namespace: str, failed: list[str]) -> None:
        super().__init__(
            f"Could not delete {len(failed)} object(s) under '{namespace}': "
            + ", ".join(failed)
        )
        self.namespace = namespace
        self.failed = failed


# --- Client input -------------------------------------------------------------


class ValidationError(CatalogError):
    """A client-supplied value was rejected."""

    code = "VALIDATION_ERROR"


class EmptyPayload(ValidationError):
    code = "EMPTY_PAYLOAD"


class InvalidUpdate(ValidationError):
    code = "INVALID_UPDATE"

    def __init__(self, rejected: list[str]) -> None:
        super().__init__(f"Invalid update: fields not allowed: {', '.join(rejected)}")
        self.rejected = rejected


class InvalidField(ValidationError):
    code = "INVALID_FIELD"


class InvalidImage(ValidationError):
    code = "INVALID_IMAGE"


class EmptyText(ValidationError):
    code = "EMPTY_TEXT"

    def __init__(self) -> None:
        super().__init__("Comment text is required")


# --- Social sub-collections ---------------------------------------------------


class SocialError(CatalogError):
    """A like or comment operation conflicts with the current state."""

    code = "SOCIAL_ERROR"


class AlreadyLiked(SocialError):
    code = "ALREADY_LIKED"

    def __init__(self, actor_id: str) -> None:
        super().__init__("Product is liked already")
        self.actor_id = actor_id


class NotLiked(SocialError):
    code = "NOT_LIKED"

    def __init__(self, actor_id: str) -> None:
        super().__init__("Product has not been liked yet")
        self.actor_id = actor_id


class CommentNotFound(SocialError):
    code = "COMMENT_NOT_FOUND"

    def __init__(self, comment_id: str) -> None:
        super().__init__(f"Comment '{comment_id}' is not found")
        self.comment_id = comment_id


# --- Authorization ------------------------------------------------------------


class AuthorizationError(CatalogError):
    code = "AUTHORIZATION_ERROR"


class NotAuthenticated(AuthorizationError):
    code = "NOT_AUTHENTICATED"

    def __init__(self) -> None:
        super().__init__("Authentication is required")


class NotAuthorized(AuthorizationError):
    code = "NOT_AUTHORIZED"

    def __init__(self, actor_id: str) -> None:
        super().__init__("User not authorized")
        self.actor_id = actor_id
