"""Authorization guard for mutating actions.

Products have no owner check: any authenticated actor may create, edit or
delete any product. Only comment removal is tied to an identity, the
comment's author.
"""

from __future__ import annotations

import enum

from catalog.domain.exceptions import NotAuthenticated, NotAuthorized
from catalog.domain.model.actor import Actor


class Action(enum.Enum):
    CREATE_PRODUCT = "create_product"
    UPDATE_PRODUCT = "update_product"
    DELETE_PRODUCT = "delete_product"
    LIKE = "like"
    UNLIKE = "unlike"
    COMMENT = "comment"
    UNCOMMENT = "uncomment"


class Decision(enum.Enum):
    ALLOW = "allow"
    DENY = "deny"


# Actions restricted to the author of the targeted resource.
_AUTHOR_ONLY = frozenset({Action.UNCOMMENT})


class AuthorizationGuard:

    def authenticate(self, actor: Actor | None) -> Actor:
        """Return the actor, or raise NotAuthenticated if there is none."""
        if actor is None or not actor.actor_id:
            raise NotAuthenticated()
        return actor

    def decide(
        self,
        actor: Actor | None,
        action: Action,
        resource_owner_id: str | None = None,
    ) -> Decision:
        if actor is None or not actor.actor_id:
            return Decision.DENY
        if action in _AUTHOR_ONLY and actor.actor_id != resource_owner_id:
            return Decision.DENY
        return Decision.ALLOW

    def authorize(
        self,
        actor: Actor | None,
        action: Action,
        resource_owner_id: str | None = None,
    ) -> Actor:
        """Return the actor if allowed, otherwise raise.

        NotAuthenticated when there is no actor at all, NotAuthorized when
        the actor is known but is not the resource's author.
        """
        actor = self.authenticate(actor)
        if self.decide(actor, action, resource_owner_id) is Decision.DENY:
            raise NotAuthorized(actor.actor_id)
        return actor
