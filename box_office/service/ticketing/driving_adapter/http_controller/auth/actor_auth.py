"""
Actor context from the upstream authentication layer.

The gateway authenticates the staff member and forwards their id and role
as headers; this service only checks roles.
"""

from typing import Optional

from fastapi import Depends, Header
from opentelemetry import trace

from box_office.platform.constant.route_constant import ACTOR_ID_HEADER, ACTOR_ROLE_HEADER
from box_office.platform.exception.exceptions import AuthenticationError, ForbiddenError
from box_office.service.ticketing.domain.enum.actor_role import ActorRole
from box_office.service.ticketing.domain.value_object.actor import Actor


class RoleAuthStrategy:
    @staticmethod
    def can_manage_show(actor: Actor) -> bool:
        return actor.role == ActorRole.ADMIN


async def get_current_actor(
    actor_id: Optional[str] = Header(default=None, alias=ACTOR_ID_HEADER),
    actor_role: Optional[str] = Header(default=None, alias=ACTOR_ROLE_HEADER),
) -> Actor:
    if not actor_id or not actor_role:
        raise AuthenticationError('Not authenticated')
    try:
        return Actor(id=int(actor_id), role=ActorRole(actor_role.lower()))
    except ValueError:
        raise AuthenticationError('Invalid actor headers')


async def require_admin(actor: Actor = Depends(get_current_actor)) -> Actor:
    tracer = trace.get_tracer(__name__)
    with tracer.start_as_current_span(
        'auth.require_admin',
        attributes={'actor.id': actor.id, 'actor.role': actor.role.value},
    ):
        if not RoleAuthStrategy.can_manage_show(actor):
            raise ForbiddenError('Only admins can perform this action')
        return actor

