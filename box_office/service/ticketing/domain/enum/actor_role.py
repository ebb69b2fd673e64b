from enum import Enum


class ActorRole(str, Enum):
    ADMIN = 'admin'
    AGENT = 'agent'
    USHER = 'usher'
