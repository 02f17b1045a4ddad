"""Link data model: short links, link lists, list items and click events.

Write paths (creating links, serving redirects) live outside this service;
the models are shared by the read-only analytics and dashboard features.
"""

from linkhub.features.accounts.models import AuthSession, User
from linkhub.features.links.models import ClickEvent, LinkList, LinkListItem, Shortlink

__all__ = [
    "AuthSession",
    "ClickEvent",
    "LinkList",
    "LinkListItem",
    "Shortlink",
    "User",
]
