"""Product aggregate.

A product owns its social sub-collections: likes and comments live inside
the record and are persisted with it, so every rule about them is enforced
here. The image itself lives in the asset store; the aggregate only carries
the URL the lifecycle manager resolved for it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from catalog.domain.exceptions import (
    AlreadyLiked,
    CommentNotFound,
    EmptyText,
    InvalidUpdate,
    NotLiked,
)
from catalog.domain.model.value_objects import Price, Quantity, new_object_id

# Fields a client may change through an update.
MUTABLE_FIELDS = (
    "name",
    "image_url",
    "price",
    "description",
    "manufacturer",
    "category",
    "condition",
    "quantity",
)

# image_url is owned by the lifecycle manager when a product is created.
CREATE_FIELDS = tuple(f for f in MUTABLE_FIELDS if f != "image_url")


@dataclass(frozen=True)
class Like:
    actor_id: str


@dataclass(frozen=True)
class Comment:
    comment_id: str
    text: str
    author_id: str
    author_display_name: str
    created_at: datetime


@dataclass
class Product:
    """A product in the catalog.

    This is an aggregate root: likes and comments are only ever changed
    through its methods. ``id`` is None until the repository assigns one.
    """

    id: str | None = None
    name: str | None = None
    description: str | None = None
    price: Price | None = None
    manufacturer: str | None = None
    category: str | None = None
    condition: str | None = None
    quantity: Quantity | None = None
    image_url: str | None = None
    likes: list[Like] = field(default_factory=list)
    comments: list[Comment] = field(default_factory=list)

    @classmethod
    def from_fields(cls, fields: dict[str, Any]) -> Product:
        """Build a new, image-less product from client fields."""
        product = cls()
        product.apply(fields, allowed=CREATE_FIELDS)
        return product

    def apply(self, patch: dict[str, Any], allowed: tuple[str, ...] = MUTABLE_FIELDS) -> None:
        """Overwrite scalar attributes from ``patch``.

        Every key and value is checked before anything is assigned, so a
        rejected patch leaves the product untouched.
        """
        rejected = sorted(key for key in patch if key not in allowed)
        if rejected:
            raise InvalidUpdate(rejected)

        coerced = {key: _coerce(key, value) for key, value in patch.items()}
        for key, value in coerced.items():
            setattr(self, key, value)

    # --- Image ----------------------------------------------------------------

    def attach_image(self, url: str) -> None:
        self.image_url = url

    def detach_image(self) -> None:
        self.image_url = None

    # --- Likes ----------------------------------------------------------------

    def has_liked(self, actor_id: str) -> bool:
        return any(like.actor_id == actor_id for like in self.likes)

    def add_like(self, actor_id: str) -> None:
        """Record a like; the newest like comes first."""
        if self.has_liked(actor_id):
            raise AlreadyLiked(actor_id)
        self.likes.insert(0, Like(actor_id=actor_id))

    def remove_like(self, actor_id: str) -> None:
        for index, like in enumerate(self.likes):
            if like.actor_id == actor_id:
                del self.likes[index]
                return
        raise NotLiked(actor_id)

    # --- Comments -------------------------------------------------------------

    def add_comment(self, text: str, author_id: str, author_display_name: str) -> Comment:
        if text is None or not text.strip():
            raise EmptyText()

        taken = {c.comment_id for c in self.comments}
        comment_id = new_object_id()
        while comment_id in taken:
            comment_id = new_object_id()

        comment = Comment(
            comment_id=comment_id,
            text=text,
            author_id=author_id,
            author_display_name=author_display_name,
            created_at=datetime.now(timezone.utc),
        )
        self.comments.append(comment)
        return comment

    def find_comment(self, comment_id: str) -> Comment:
        for comment in self.comments:
            if comment.comment_id == comment_id:
                return comment
        raise CommentNotFound(comment_id)

    def remove_comment(self, comment_id: str) -> Comment:
        """Remove the comment with this id, whoever else has commented."""
        comment = self.find_comment(comment_id)
        self.comments = [c for c in self.comments if c.comment_id != comment_id]
        return comment


def _coerce(key: str, value: Any) -> Any:
    if value is None:
        return None
    if key == "price":
        return value if isinstance(value, Price) else Price.of(value)
    if key == "quantity":
        return value if isinstance(value, Quantity) else Quantity.of(value)
    return str(value)
