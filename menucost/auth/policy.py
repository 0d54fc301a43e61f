"""
Role based authorization.

Every mutating route depends on ``require(<action>)``; nothing else decides
who may do what.

    admin  every action
    pcp    view, edit menus, edit catalog
    user   view
    (none) view
"""
from enum import Enum
from typing import Dict, FrozenSet, Iterable

from fastapi import Depends

from menucost.auth.dependencies import get_current_user
from menucost.core.constants import ROLE_ADMIN, ROLE_PCP, ROLE_USER
from menucost.core.errors import PermissionDeniedError


class Action(str, Enum):
    view = "view"
    edit_menus = "edit_menus"          # menus, line items, duplication, menu types
    edit_catalog = "edit_catalog"      # products, categories, kits
    delete_catalog = "delete_catalog"
    delete_menu_type = "delete_menu_type"
    manage_users = "manage_users"


AUTHENTICATED_GRANTS: FrozenSet[Action] = frozenset({Action.view})

ROLE_GRANTS: Dict[str, FrozenSet[Action]] = {
    ROLE_ADMIN: frozenset(Action),
    ROLE_PCP: frozenset({Action.view, Action.edit_menus, Action.edit_catalog}),
    ROLE_USER: frozenset({Action.view}),
}

DENIED_MESSAGES = {
    Action.view: "You are not allowed to view this data",
    Action.edit_menus: "Only admin or PCP users can edit menus",
    Action.edit_catalog: "Only admin or PCP users can edit products and kits",
    Action.delete_catalog: "Only administrators can delete products, categories and kits",
    Action.delete_menu_type: "Only administrators can delete menu types",
    Action.manage_users: "Only administrators can manage users",
}


def roles_of(user) -> FrozenSet[str]:
    return frozenset(r.role for r in (getattr(user, "roles", None) or []))


def grants(roles: Iterable[str]) -> FrozenSet[Action]:
    granted = set(AUTHENTICATED_GRANTS)
    for role in roles:
        granted |= ROLE_GRANTS.get(role, frozenset())
    return frozenset(granted)


def is_allowed(roles: Iterable[str], action: Action) -> bool:
    return action in grants(roles)


def ensure_allowed(roles: Iterable[str], action: Action) -> None:
    if not is_allowed(roles, action):
        raise PermissionDeniedError(DENIED_MESSAGES[action])


def capabilities(roles: Iterable[str]) -> Dict[str, bool]:
    roles = frozenset(roles)
    return {
        "is_admin": ROLE_ADMIN in roles,
        "is_pcp": ROLE_PCP in roles,
        "is_user": ROLE_USER in roles,
        "can_edit": is_allowed(roles, Action.edit_menus),
    }


def require(action: Action):
    """FastAPI dependency: the current user, once the policy allows ``action``"""
    async def _dep(user=Depends(get_current_user)):
        ensure_allowed(roles_of(user), action)
        return user
    return _dep
