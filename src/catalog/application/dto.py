"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the application layer and its callers (the CLI,
or an HTTP transport) without exposing the aggregate itself.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field

from catalog.domain.model.product import Comment, Like, Product


@dataclass(frozen=True)
class LikeDTO:
    actor_id: str

    @staticmethod
    def from_like(like: Like) -> LikeDTO:
        return LikeDTO(actor_id=like.actor_id)


@dataclass(frozen=True)
class CommentDTO:
    comment_id: str
    text: str
    author_id: str
    author_display_name: str
    created_at: str  # ISO-8601, UTC

    @staticmethod
    def from_comment(comment: Comment) -> CommentDTO:
        return CommentDTO(
            comment_id=comment.comment_id,
            text=comment.text,
            author_id=comment.author_id,
            author_display_name=comment.author_display_name,
            created_at=comment.created_at.isoformat(),
        )


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as returned to the client."""

    id: str
    name: str | None
    description: str | None
    price: str | None  # formatted, e.g. "10.00"
    manufacturer: str | None
    category: str | None
    condition: str | None
    quantity: int | None
    image_url: str | None
    likes: list[LikeDTO]
    comments: list[CommentDTO]

    @staticmethod
    def from_product(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,  # type: ignore[arg-type]
            name=product.name,
            description=product.description,
            price=str(product.price) if product.price is not None else None,
            manufacturer=product.manufacturer,
            category=product.category,
            condition=product.condition,
            quantity=product.quantity.value if product.quantity is not None else None,
            image_url=product.image_url,
            likes=[LikeDTO.from_like(like) for like in product.likes],
            comments=[CommentDTO.from_comment(c) for c in product.comments],
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class MutationResult:
    """Output of a create or update.

    ``warnings`` lists the image sub-steps that failed without failing
    the mutation itself.
    """

    product: Product
    warnings: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.warnings
