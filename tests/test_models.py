import pytest

from smarteru.exceptions import InvalidArgumentException
from smarteru.models import (
    CustomField,
    Group,
    GroupPermissions,
    LearnerReport,
    LearningModule,
    Permission,
    PermissionAction,
    Status,
    Tag,
    User,
)


def test_group_permissions_employee_id_clears_email():
    membership = GroupPermissions(email="jane@example.com")
    membership.employee_id = "E-1"
    assert membership.email is None
    assert membership.employee_id == "E-1"

    membership.email = "jane@example.com"
    assert membership.employee_id is None


def test_group_permissions_group_id_clears_group_name():
    membership = GroupPermissions(group_name="Sales")
    membership.group_id = "42"
    assert membership.group_name is None

    membership.group_name = "Support"
    assert membership.group_id is None
    assert membership.group_name == "Support"


def test_group_permissions_rejects_both_sides_at_construction():
    with pytest.raises(InvalidArgumentException):
        GroupPermissions(email="jane@example.com", employee_id="E-1")


def test_group_permissions_clearing_to_none_keeps_sibling():
    membership = GroupPermissions(email="jane@example.com")
    membership.employee_id = None
    assert membership.email == "jane@example.com"


def test_group_tags_reject_wrong_element_type():
    group = Group(name="Sales")
    with pytest.raises(InvalidArgumentException) as exc_info:
        group.tags = [Tag(tag_name="Region"), "not-a-tag"]
    assert str(exc_info.value) == "Parameter to Group.tags must be a list of Tag instances"


def test_group_tags_round_trip():
    tags = [Tag(tag_id="1", tag_values="North"), Tag(tag_name="Region", tag_values="EU")]
    group = Group(name="Sales", tags=tags)
    assert group.tags == tags


def test_notification_emails_must_be_strings():
    with pytest.raises(InvalidArgumentException) as exc_info:
        Group(notification_emails=["ok@example.com", 7])
    assert "Group.notification_emails" in str(exc_info.value)
    assert "email addresses as strings" in str(exc_info.value)


def test_custom_fields_reject_wrong_element_type():
    with pytest.raises(InvalidArgumentException, match="User.custom_fields"):
        User(custom_fields=[{"name": "Shirt", "value": "L"}])

    report = LearnerReport()
    with pytest.raises(InvalidArgumentException, match="LearnerReport.custom_fields"):
        report.custom_fields = ["Shirt"]

    fields = [CustomField(name="Shirt", value="L")]
    report.custom_fields = fields
    assert report.custom_fields == fields


def test_group_status_guard():
    group = Group(name="Sales")
    with pytest.raises(InvalidArgumentException) as exc_info:
        group.status = "Bogus"
    assert str(exc_info.value) == '"Bogus" is not one of Active, Inactive'

    group.status = "Active"
    assert group.status == Status.ACTIVE
    assert group.status.value == "Active"


def test_learner_report_columns_are_checked():
    with pytest.raises(InvalidArgumentException):
        LearnerReport(columns=["GRADE", "FAVOURITE_COLOUR"])
    assert LearnerReport(columns=["GRADE"]).columns == ["GRADE"]


def test_tag_values_are_comma_joined():
    tag = Tag(tag_name="Region", tag_values=["North", " South "])
    assert tag.tag_values == "North,South"


def test_actions_are_validated():
    with pytest.raises(InvalidArgumentException):
        LearningModule(id="1", action="Keep")
    with pytest.raises(InvalidArgumentException):
        Permission(action="Maybe", code="PROCTOR")
    assert Permission(action="Grant", code="PROCTOR").action == PermissionAction.GRANT


def test_user_defaults():
    user = User(email="jane@example.com")
    assert user.status == Status.ACTIVE
    assert user.allow_feedback is False
    assert user.receive_notifications is True
    assert user.has_identifier
    assert not User().has_identifier


def test_to_dict_drops_unset_values():
    data = Group(name="Sales").to_dict()
    assert data["name"] == "Sales"
    assert "group_id" not in data
