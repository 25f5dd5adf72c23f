"""How catalog errors and use cases map onto HTTP.

The catalog ships no web server; this module is the contract an HTTP
transport has to honour: which route drives which use case, the status
code for every error class, and the error body (never a stack trace).
"""

from __future__ import annotations

from catalog.application.dto import ProductDTO
from catalog.domain.exceptions import (
    AlreadyLiked,
    CatalogError,
    CommentNotFound,
    EmptyPayload,
    EmptyText,
    InvalidField,
    InvalidId,
    InvalidImage,
    InvalidUpdate,
    NotAuthenticated,
    NotAuthorized,
    NotLiked,
    ObjectNotFound,
    PartialDeleteFailure,
    ProductNotFound,
    StoreUnavailable,
)
from catalog.domain.model.product import Product

# (method, path) -> (use case, response body on success)
ROUTES = {
    ("GET", "/products"): ("list products", "array of products"),
    ("GET", "/products/:id"): ("get product", "product"),
    ("POST", "/products"): ("create product", "product"),
    ("PUT", "/products/:id"): ("update product", "product"),
    ("DELETE", "/products/:id"): ("delete product", "{result, product}"),
    ("PUT", "/products/like/:id"): ("like", "likes array"),
    ("PUT", "/products/unlike/:id"): ("unlike", "likes array"),
    ("PUT", "/products/comment/:id"): ("comment", "comments array"),
    ("DELETE", "/products/comment/:id/:commentId"): ("uncomment", "comments array"),
}

STATUS_BY_ERROR: dict[type[CatalogError], int] = {
    ProductNotFound: 404,
    InvalidId: 404,
    CommentNotFound: 404,
    ObjectNotFound: 404,
    EmptyPayload: 400,
    InvalidUpdate: 400,
    InvalidField: 400,
    InvalidImage: 400,
    EmptyText: 400,
    AlreadyLiked: 400,
    NotLiked: 400,
    NotAuthenticated: 401,
    NotAuthorized: 401,
    StoreUnavailable: 500,
    PartialDeleteFailure: 500,
}

DELETE_RESULT = "remove successfully"


def status_for(exc: BaseException) -> int:
    """Status code for ``exc``; anything unexpected is a server error."""
    for cls in type(exc).__mro__:
        if cls in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[cls]  # type: ignore[index]
    return 500


def error_body(exc: BaseException) -> dict[str, str]:
    """Structured error payload. Server errors do not leak their message."""
    code = exc.code if isinstance(exc, CatalogError) else "SERVER_ERROR"
    message = str(exc) if status_for(exc) < 500 else "Server error"
    return {"error": code, "message": message}


# --- Success bodies -----------------------------------------------------------


def product_body(product: Product) -> dict:
    return ProductDTO.from_product(product).to_dict()


def delete_body(product: Product) -> dict:
    return {"result": DELETE_RESULT, "product": product_body(product)}


def likes_body(product: Product) -> list[dict]:
    return product_body(product)["likes"]


def comments_body(product: Product) -> list[dict]:
    return product_body(product)["comments"]
