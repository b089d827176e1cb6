import xml.etree.ElementTree as ET
from datetime import date

import pytest

from smarteru.exceptions import MissingValueException
from smarteru.models import (
    Group,
    GroupPermissions,
    LearningModule,
    MembershipAction,
    Permission,
    PermissionAction,
    SubscriptionVariant,
    Tag,
    User,
)
from smarteru.queries import (
    DateRangeTag,
    GetGroupQuery,
    GetLearnerReportQuery,
    GetUserQuery,
    ListGroupsQuery,
    ListUsersQuery,
    MatchTag,
)
from smarteru.xml_generator import XMLGenerator

ACCOUNT_API = "account-key"
USER_API = "user-key"


def generate(method, *args, **kwargs):
    xml = getattr(XMLGenerator(), method)(ACCOUNT_API, USER_API, *args, **kwargs)
    assert xml.startswith('<?xml version="1.0"?>\n<SmarterU>')
    return xml, ET.fromstring(xml)


def test_envelope_shape():
    _, root = generate("get_group", GetGroupQuery(name="Sales"))
    assert [child.tag for child in root] == ["AccountAPI", "UserAPI", "Method", "Parameters"]
    assert root.findtext("AccountAPI") == ACCOUNT_API
    assert root.findtext("UserAPI") == USER_API
    assert root.findtext("Method") == "getGroup"
    assert root.findtext("Parameters/Group/Name") == "Sales"


def test_create_user_minimal():
    user = User(email="jane@example.com", given_name="Jane", surname="Doe", home_group="Sales")
    _, root = generate("create_user", user)
    info = root.find("Parameters/User/Info")

    assert info.findtext("Email") == "jane@example.com"
    assert info.find("EmployeeID") is None
    assert info.findtext("LearnerNotifications") == "0"
    assert info.find("Password") is not None
    assert root.find("Parameters/User/Profile/AllowFeedback") is None
    assert root.findtext("Parameters/User/Profile/ReceiveNotifications") == "1"
    assert root.findtext("Parameters/User/Profile/Status") == "Active"
    assert root.findtext("Parameters/User/Groups/Group/GroupName") == "Sales"
    assert root.find("Parameters/User/Venues") is not None
    assert root.find("Parameters/User/Wages") is not None


def test_create_user_extra_memberships_carry_permissions():
    membership = GroupPermissions(
        group_id="99",
        permissions=[Permission(action="Grant", code="MANAGE_USERS")],
    )
    user = User(employee_id="E-1", home_group="Sales", groups=[membership])
    _, root = generate("create_user", user)
    groups = root.findall("Parameters/User/Groups/Group")

    assert [group.findtext("GroupName") for group in groups] == ["Sales", None]
    assert groups[1].findtext("GroupID") == "99"
    assert groups[1].findtext("GroupPermissions/Permission/Action") == "Grant"
    assert groups[1].findtext("GroupPermissions/Permission/Code") == "MANAGE_USERS"


def test_create_user_requires_identifier_and_home_group():
    with pytest.raises(MissingValueException):
        XMLGenerator().create_user(ACCOUNT_API, USER_API, User(home_group="Sales"))
    with pytest.raises(MissingValueException):
        XMLGenerator().create_user(ACCOUNT_API, USER_API, User(email="jane@example.com"))


def test_get_user_uses_query_method():
    query = GetUserQuery(employee_id="E-1", method="getUserGroups")
    _, root = generate("get_user", query)
    assert root.findtext("Method") == "getUserGroups"
    assert root.findtext("Parameters/User/EmployeeID") == "E-1"


def test_list_users_filters():
    query = ListUsersQuery(
        page_size=25,
        email=MatchTag(match_type="CONTAINS", value="example.com"),
        created_date=DateRangeTag(date_from=date(2022, 7, 1), date_to=date(2022, 7, 31)),
        teams=["Blue", "Red"],
    )
    _, root = generate("list_users", query)
    user = root.find("Parameters/User")

    assert user.findtext("Page") == "1"
    assert user.findtext("PageSize") == "25"
    email = user.find("Filters/Users/UserIdentifier/Email")
    assert email.findtext("MatchType") == "CONTAINS"
    assert email.findtext("Value") == "example.com"
    assert user.findtext("Filters/UserStatus") == "All"
    assert user.findtext("Filters/CreatedDate/CreatedDateFrom") == "01/07/2022"
    assert user.findtext("Filters/CreatedDate/CreatedDateTo") == "31/07/2022"
    assert [team.text for team in user.findall("Filters/Teams/TeamName")] == ["Blue", "Red"]


def test_update_user_identifier_prefers_old_values():
    user = User(old_email="old@example.com", email="new@example.com", title="Manager")
    _, root = generate("update_user", user)
    user_element = root.find("Parameters/User")

    assert [child.tag for child in user_element] == [
        "Identifier", "Info", "Profile", "Groups", "Venues", "Wages",
    ]
    assert user_element.findtext("Identifier/Email") == "old@example.com"
    assert user_element.findtext("Info/Email") == "new@example.com"
    assert user_element.findtext("Profile/Title") == "Manager"


def test_update_user_without_rename_keeps_email_out_of_info():
    _, root = generate("update_user", User(employee_id="E-1", surname="Doe"))
    assert root.findtext("Parameters/User/Identifier/EmployeeID") == "E-1"
    assert root.find("Parameters/User/Info/EmployeeID") is None
    assert root.findtext("Parameters/User/Info/Surname") == "Doe"


def test_update_user_always_sends_notification_flags():
    _, root = generate("update_user", User(email="jane@example.com"))
    info = root.find("Parameters/User/Info")
    assert info.findtext("LearnerNotifications") == "0"
    assert info.findtext("SupervisorNotifications") == "0"
    assert root.find("Parameters/User/Profile/AllowFeedback") is None


def test_allow_feedback_only_sent_when_enabled():
    _, root = generate("update_user", User(email="jane@example.com", allow_feedback=True))
    assert root.findtext("Parameters/User/Profile/AllowFeedback") == "1"


def test_change_permissions():
    user = User(email="jane@example.com")
    group = Group(group_id="12")
    _, root = generate(
        "change_permissions", user, group, ["PROCTOR", "MARKER"], PermissionAction.DENY
    )
    group_element = root.find("Parameters/User/Groups/Group")

    assert root.findtext("Method") == "updateUser"
    assert root.findtext("Parameters/User/Identifier/Email") == "jane@example.com"
    assert group_element.findtext("GroupID") == "12"
    assert group_element.findtext("GroupAction") == "Add"
    permissions = group_element.findall("GroupPermissions/Permission")
    assert [(p.findtext("Action"), p.findtext("Code")) for p in permissions] == [
        ("Deny", "PROCTOR"),
        ("Deny", "MARKER"),
    ]


def test_request_external_authorization_uses_one_key():
    _, root = generate("request_external_authorization", employee_id="E-1")
    security = root.find("Parameters/Security")
    assert [child.tag for child in security] == ["EmployeeID"]
    with pytest.raises(MissingValueException):
        XMLGenerator().request_external_authorization(ACCOUNT_API, USER_API)


def test_create_group_fully_populated():
    group = Group(
        name="My Group",
        group_id="12",
        status="Active",
        description="Sales team",
        notification_emails=["a@example.com", "b@example.com"],
        user_help_override_default=False,
        user_help_enabled=True,
        user_help_email=["help@example.com", "desk@example.com"],
        user_help_text="Ask us",
        tags=[Tag(tag_id="1", tag_values="North"), Tag(tag_name="Region", tag_values=["EU", "US"])],
        user_limit_enabled=True,
        user_limit_amount=50,
        learning_modules=[LearningModule(id="7", allow_self_enroll=True, auto_enroll=False)],
        subscription_variants=[SubscriptionVariant(id="3", requires_credits=True)],
        dashboard_set_id="5",
    )
    _, root = generate("create_group", group)
    body = root.find("Parameters/Group")

    assert body.findtext("Name") == "My Group"
    assert body.findtext("GroupID") == "12"
    assert [e.text for e in body.findall("NotificationEmails/NotificationEmail")] == [
        "a@example.com",
        "b@example.com",
    ]
    assert body.findtext("UserHelpOverrideDefault") == "0"
    assert body.findtext("UserHelpEnabled") == "1"
    assert body.findtext("UserHelpEmail") == "help@example.com,desk@example.com"
    tags = body.findall("Tags2/Tag2")
    assert tags[0].findtext("TagID") == "1"
    assert tags[1].findtext("TagName") == "Region"
    assert tags[1].findtext("TagValues") == "EU,US"
    assert body.findtext("UserLimit/Enabled") == "1"
    assert body.findtext("UserLimit/Amount") == "50"
    assert body.find("Users") is not None
    module = body.find("LearningModules/LearningModule")
    assert module.findtext("ID") == "7"
    assert module.find("LearningModuleAction") is None
    assert module.findtext("AllowSelfEnroll") == "1"
    assert module.findtext("AutoEnroll") == "0"
    assert body.findtext("SubscriptionVariants/SubscriptionVariant/RequiresCredits") == "1"
    assert body.findtext("DashboardSetID") == "5"


def test_create_group_bare_keeps_status_and_notification_tags():
    _, root = generate("create_group", Group(name="Bare"))
    body = root.find("Parameters/Group")

    assert [child.tag for child in body][:5] == [
        "Name", "Status", "Description", "HomeGroupMessage", "NotificationEmails",
    ]
    assert body.findtext("Status") == ""
    assert len(body.find("NotificationEmails")) == 0
    assert body.find("Tags2") is None


def test_group_tag_without_identifier_is_rejected():
    group = Group(name="Sales", tags=[Tag(tag_values="x")])
    with pytest.raises(MissingValueException):
        XMLGenerator().create_group(ACCOUNT_API, USER_API, group)


def test_list_groups_filters():
    query = ListGroupsQuery(
        group_name=MatchTag(value="Sales"), group_status="Active", tags=[Tag(tag_name="Region")]
    )
    _, root = generate("list_groups", query)
    filters = root.find("Parameters/Group/Filters")
    assert filters.findtext("GroupName/MatchType") == "EXACT"
    assert filters.findtext("GroupName/Value") == "Sales"
    assert filters.findtext("GroupStatus") == "Active"
    assert filters.findtext("Tags2/Tag2/TagName") == "Region"


def test_update_group_rename():
    group = Group(
        old_name="Old Sales",
        name="Sales",
        learning_modules=[LearningModule(id="7", action=MembershipAction.REMOVE)],
    )
    _, root = generate("update_group", group)
    body = root.find("Parameters/Group")

    assert body.findtext("Identifier/Name") == "Old Sales"
    assert body.findtext("Name") == "Sales"
    assert body.find("GroupID") is None
    assert body.findtext("LearningModules/LearningModule/LearningModuleAction") == "Remove"
    assert body.find("Users") is not None
    assert body.find("SubscriptionVariants") is not None


def test_update_group_without_rename():
    _, root = generate("update_group", Group(group_id="12", description="x"))
    body = root.find("Parameters/Group")
    assert body.findtext("Identifier/GroupID") == "12"
    assert body.find("GroupID") is None
    assert body.find("Name") is None
    assert body.find("Status") is None
    assert body.find("NotificationEmails") is None


def test_change_group_members():
    users = [User(email="jane@example.com", home_group="Sales"), User(employee_id="E-2")]
    _, root = generate("change_group_members", users, Group(name="Sales"), MembershipAction.ADD)
    body = root.find("Parameters/Group")

    assert root.findtext("Method") == "updateGroup"
    assert body.findtext("Identifier/Name") == "Sales"
    members = body.findall("Users/User")
    assert members[0].findtext("Email") == "jane@example.com"
    assert members[0].findtext("UserAction") == "Add"
    assert members[0].findtext("HomeGroup") == "1"
    assert members[1].findtext("EmployeeID") == "E-2"
    assert members[1].findtext("HomeGroup") == "0"
    assert body.find("LearningModules") is not None


def test_get_learner_report():
    query = GetLearnerReportQuery(
        group_names=["Sales"],
        user_employee_ids=["E-1", "E-2"],
        learning_module_status="Active",
        enrollment_statuses=["Completed"],
        completed_dates=[DateRangeTag(date_from=date(2022, 7, 1), date_to=date(2022, 7, 31))],
        created_date=DateRangeTag(date_from=date(2022, 1, 1), date_to=date(2022, 12, 31)),
        columns=["GRADE", "POINTS"],
    )
    _, root = generate("get_learner_report", query)
    filters = root.find("Parameters/Report/Filters")

    assert root.findtext("Parameters/Report/Page") == "1"
    assert root.findtext("Parameters/Report/PageSize") == "50"
    assert filters.findtext("Groups/GroupNames/GroupName") == "Sales"
    assert filters.findtext("LearningModules/LearningModule/LearningModuleStatus") == "Active"
    assert filters.findtext("LearningModules/EnrollmentStatuses/EnrollmentStatus") == "Completed"
    completed = filters.find("LearningModules/CompletedDates/CompletedDate")
    assert completed.findtext("CompletedDateFrom") == "01-Jul-22"
    assert completed.findtext("CompletedDateTo") == "31-Jul-22"
    assert filters.findtext("Enrollments/CreatedDate/CreatedDateFrom") == "01-Jan-22"
    assert [e.text for e in filters.findall("Users/UserIdentifier/EmployeeID")] == ["E-1", "E-2"]
    assert [e.text for e in root.findall("Parameters/Columns/ColumnName")] == ["GRADE", "POINTS"]
    assert root.find("Parameters/CustomFields") is not None


def test_get_learner_report_requires_filters():
    with pytest.raises(MissingValueException):
        XMLGenerator().get_learner_report(ACCOUNT_API, USER_API, GetLearnerReportQuery(user_status="All"))
