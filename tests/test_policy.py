"""Unit tests for the role policy."""
from types import SimpleNamespace

import pytest

from menucost.auth.policy import Action, capabilities, ensure_allowed, is_allowed, roles_of
from menucost.core.errors import PermissionDeniedError


@pytest.mark.parametrize("action", list(Action))
def test_admin_may_do_everything(action):
    assert is_allowed({"admin"}, action)


@pytest.mark.parametrize("action,allowed", [
    (Action.view, True),
    (Action.edit_menus, True),
    (Action.edit_catalog, True),
    (Action.delete_catalog, False),
    (Action.delete_menu_type, False),
    (Action.manage_users, False),
])
def test_pcp_grants(action, allowed):
    assert is_allowed({"pcp"}, action) is allowed


@pytest.mark.parametrize("roles", [set(), {"user"}])
def test_user_and_roleless_only_view(roles):
    assert is_allowed(roles, Action.view)
    assert not is_allowed(roles, Action.edit_menus)
    assert not is_allowed(roles, Action.edit_catalog)


def test_grants_are_unioned_across_roles():
    assert is_allowed({"user", "pcp"}, Action.edit_menus)


def test_unknown_role_grants_nothing_extra():
    assert not is_allowed({"superuser"}, Action.edit_menus)


def test_ensure_allowed_raises_with_message():
    with pytest.raises(PermissionDeniedError) as exc:
        ensure_allowed({"pcp"}, Action.delete_menu_type)
    assert exc.value.status_code == 403
    assert "administrators" in exc.value.message


def test_capabilities():
    assert capabilities({"pcp"}) == {"is_admin": False, "is_pcp": True, "is_user": False, "can_edit": True}
    assert capabilities({"user"})["can_edit"] is False
    assert capabilities({"admin"})["is_admin"] is True


def test_roles_of_reads_loaded_roles():
    user = SimpleNamespace(roles=[SimpleNamespace(role="admin"), SimpleNamespace(role="user")])
    assert roles_of(user) == {"admin", "user"}
    assert roles_of(SimpleNamespace(roles=None)) == frozenset()
