"""Demonstrate SmarterU group provisioning with credentials from the environment."""
from smarteru import Client, SmarterUException
from smarteru.config.settings import get_settings
from smarteru.models import Group, User
from smarteru.queries import GetGroupQuery
from smarteru.utils.log import setup_logging


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)
    if not settings.account_api_key or not settings.user_api_key:
        print("[WARN] SMARTERU_ACCOUNT_API_KEY and SMARTERU_USER_API_KEY must be set")
        return

    with Client.from_settings(settings) as client:
        existing = client.get_group(GetGroupQuery(name="Test-Group"))
        if existing.response is None:
            created = client.create_group(Group(name="Test-Group", description="Created by group_demo"))
            print(f"Created group {created.name} ({created.group_id})")
        else:
            print(f"Group {existing.response.name} already exists ({existing.response.group_id})")

        try:
            client.add_users_to_group([User(email="alice@contoso.com")], Group(name="Test-Group"))
        except SmarterUException as exc:
            print(exc)
            return

        for membership in client.read_groups_for_user_by_email("alice@contoso.com"):
            codes = ", ".join(permission.code for permission in membership.permissions)
            print(f"  - {membership.group_name or membership.group_id}: {codes or 'no permissions'}")


if __name__ == "__main__":
    main()
