"""User entity, as seen from the read side."""

from blog.domain.model.common import DomainModel
from blog.domain.value import UserId, Username


class User(DomainModel):
    """Author of posts. Owned and mutated elsewhere; read-only here."""

    id: UserId
    username: Username
