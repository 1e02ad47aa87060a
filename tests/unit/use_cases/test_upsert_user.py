from telecrm.app.use_cases.users import UpsertUserCommand, build_upserted_user
from telecrm.domain.entities import User, UserRole


def test_new_user_defaults_to_viewer():
    user = build_upserted_user(None, UpsertUserCommand(open_id="u-1", name="A"), owner_open_id="")

    assert user.open_id == "u-1"
    assert user.role == UserRole.viewer
    assert user.last_signed_in is not None


def test_explicit_role_is_applied():
    existing = User(id=2, open_id="u-1", role=UserRole.viewer)

    user = build_upserted_user(
        existing, UpsertUserCommand(open_id="u-1", role=UserRole.agent), owner_open_id=""
    )

    assert user is existing
    assert user.role == UserRole.agent


def test_unset_fields_are_left_alone():
    existing = User(id=2, open_id="u-1", name="Keep", email="keep@example.com")

    user = build_upserted_user(existing, UpsertUserCommand(open_id="u-1"), owner_open_id="")

    assert user.name == "Keep"
    assert user.email == "keep@example.com"


def test_owner_is_always_admin():
    for role in (None, UserRole.viewer, UserRole.agent, UserRole.manager):
        user = build_upserted_user(
            None, UpsertUserCommand(open_id="owner", role=role), owner_open_id="owner"
        )
        assert user.role == UserRole.admin


def test_empty_owner_promotes_nobody():
    user = build_upserted_user(None, UpsertUserCommand(open_id=""), owner_open_id="")

    assert user.role == UserRole.viewer
