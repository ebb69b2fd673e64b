import attrs

from box_office.service.ticketing.domain.enum.actor_role import ActorRole


@attrs.frozen
class Actor:
    """The staff member performing an operation, passed explicitly into every use case."""

    id: int
    role: ActorRole = ActorRole.AGENT

    @property
    def is_admin(self) -> bool:
        return self.role == ActorRole.ADMIN
