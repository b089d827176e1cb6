import logging
from datetime import datetime

import httpx
import pytest
from conftest import ACCOUNT_API, USER_API, envelope

from smarteru.client import FAILED_REQUEST_LOG_MESSAGE, SMARTERU_EXCEPTION_MESSAGE, ApiResponse
from smarteru.exceptions import InvalidArgumentException, MissingValueException, SmarterUException
from smarteru.models import ErrorCode, Group, Status, User
from smarteru.queries import GetUserQuery, ListUsersQuery
from smarteru.xml_generator import XMLGenerator

USER_INFO = """
<User>
  <ID>17</ID>
  <Email>jane@example.com</Email>
  <EmployeeID>E-1</EmployeeID>
  <CreatedDate>2022-07-01</CreatedDate>
  <ModifiedDate>2022-07-02</ModifiedDate>
  <GivenName>Jane</GivenName>
  <Surname>Doe</Surname>
  <Language>English</Language>
  <AllowFeedback>1</AllowFeedback>
  <Status>Active</Status>
  <HomeGroup>Sales</HomeGroup>
  <Supervisors><Supervisor>boss@example.com</Supervisor></Supervisors>
  <Teams><Team>Blue</Team><Team>Red</Team></Teams>
  <SendWeeklyTaskReminder>0</SendWeeklyTaskReminder>
  <ReceiveNotifications>1</ReceiveNotifications>
</User>
"""


def test_create_user_returns_identifiers(api, client):
    api.respond(envelope("<Email>jane@example.com</Email><EmployeeID>E-1</EmployeeID>"))
    user = User(email="jane@example.com", employee_id="E-1", home_group="Sales")

    created = client.create_user(user)

    assert created.email == "jane@example.com"
    assert created.employee_id == "E-1"
    assert len(api.requests) == 1
    assert api.requests[0].method == "POST"
    assert str(api.requests[0].url) == "https://api.smarteru.com/apiv2/"
    assert api.package() == XMLGenerator().create_user(ACCOUNT_API, USER_API, user)


def test_create_user_validates_before_sending(api, client):
    with pytest.raises(MissingValueException):
        client.create_user(User(home_group="Sales"))
    with pytest.raises(MissingValueException):
        client.create_user(User(email="jane@example.com"))
    assert api.requests == []


def test_get_user_parses_profile(api, client):
    api.respond(envelope(USER_INFO))

    result = client.get_user(GetUserQuery(id="17"))

    assert isinstance(result, ApiResponse)
    assert result.errors == {}
    user = result.response
    assert user.id == "17"
    assert user.email == "jane@example.com"
    assert user.created_date == datetime(2022, 7, 1)
    assert user.allow_feedback is True
    assert user.learner_notifications is False
    assert user.status == Status.ACTIVE
    assert user.supervisors == ["boss@example.com"]
    assert user.teams == ["Blue", "Red"]
    assert "<ID>17</ID>" in api.package()


def test_get_user_hard_failure_carries_error_codes(api, client, caplog):
    api.respond(envelope(result="Failed", errors=[("GU:01", "First problem"), ("GU:02", "Second problem")]))

    with caplog.at_level(logging.ERROR):
        with pytest.raises(SmarterUException) as exc_info:
            client.get_user(GetUserQuery(employee_id="E-1"))

    error = exc_info.value
    assert error.message == SMARTERU_EXCEPTION_MESSAGE
    assert error.error_codes == [
        ErrorCode(error_code="GU:01", error_message="First problem"),
        ErrorCode(error_code="GU:02", error_message="Second problem"),
    ]
    assert "<AccountAPI>********</AccountAPI>" in error.request
    assert ACCOUNT_API not in error.request
    assert str(error).splitlines()[1:] == ["\t{GU:01: First problem}", "\t{GU:02: Second problem}"]

    record = caplog.records[-1]
    assert record.getMessage() == FAILED_REQUEST_LOG_MESSAGE
    assert USER_API not in record.request
    assert "<Result>Failed</Result>" in record.response


def test_get_user_not_found_is_not_an_exception(api, client, caplog):
    api.respond(envelope(result="Failed", errors=[("GU:03", "The user requested does not exist.")]))

    with caplog.at_level(logging.ERROR):
        result = client.get_user(GetUserQuery(email="ghost@example.com"))

    assert result.response is None
    assert result.errors == {"GU:03": "The user requested does not exist."}
    assert not [r for r in caplog.records if r.levelno >= logging.ERROR]
    assert client.read_user_by_email("ghost@example.com") is None


def test_get_user_soft_errors_are_returned(api, client, caplog):
    api.respond(envelope(USER_INFO, errors=[("GU:99", "Partial data")]))

    with caplog.at_level(logging.WARNING):
        result = client.get_user(GetUserQuery(email="jane@example.com"))

    assert result.response.email == "jane@example.com"
    assert result.errors == {"GU:99": "Partial data"}
    assert any("GU:99" in record.getMessage() for record in caplog.records)


def test_get_user_requires_identifier(api, client):
    with pytest.raises(MissingValueException):
        client.get_user(GetUserQuery())
    assert api.requests == []


def test_read_user_helpers(api, client):
    api.respond(envelope(USER_INFO))
    assert client.read_user_by_id("17").id == "17"
    assert client.read_user_by_employee_id("E-1").employee_id == "E-1"
    assert "<EmployeeID>E-1</EmployeeID>" in api.package()


def test_list_users(api, client):
    api.respond(envelope(
        "<Users>"
        "<User><ID>1</ID><Email>a@example.com</Email><Status>Active</Status>"
        "<CreatedDate>2022-07-01</CreatedDate><Teams><Team>Blue</Team></Teams></User>"
        "<User><ID>2</ID><EmployeeID>E-2</EmployeeID><Status>Inactive</Status></User>"
        "</Users>"
    ))

    users = client.list_users(ListUsersQuery())

    assert [user.id for user in users] == ["1", "2"]
    assert users[0].teams == ["Blue"]
    assert users[1].status == Status.INACTIVE
    assert "<Method>listUsers</Method>" in api.package()


def test_update_user_clears_old_values(api, client):
    api.respond(envelope("<Email>new@example.com</Email><EmployeeID>E-1</EmployeeID>"))
    user = User(old_email="old@example.com", email="new@example.com")

    updated = client.update_user(user)

    assert updated.email == "new@example.com"
    assert user.old_email is None
    assert user.old_employee_id is None
    assert "<Email>old@example.com</Email>" in api.package()

    client.update_user(user)
    assert "old@example.com" not in api.package()


def test_update_user_failure_keeps_old_values(api, client):
    api.respond(envelope(result="Failed", errors=[("UU:01", "No such user")]))
    user = User(old_email="old@example.com", email="new@example.com")
    with pytest.raises(SmarterUException):
        client.update_user(user)
    assert user.old_email == "old@example.com"


def test_get_user_groups(api, client):
    api.respond(envelope(
        "<UserGroups>"
        "<Group><Name>Sales</Name><Identifier>Sales</Identifier><IsHomeGroup>1</IsHomeGroup>"
        "<Permissions><Permission>MANAGE_USERS</Permission><Permission>PROCTOR</Permission></Permissions>"
        "</Group>"
        "<Group><Identifier>88</Identifier><IsHomeGroup>0</IsHomeGroup><Permissions/></Group>"
        "</UserGroups>"
    ))

    result = client.get_user_groups(GetUserQuery(email="jane@example.com"))

    sales, other = result.response
    assert sales.group_name == "Sales"
    assert sales.home_group is True
    assert [permission.code for permission in sales.permissions] == ["MANAGE_USERS", "PROCTOR"]
    assert other.group_id == "88"
    assert other.home_group is False
    assert "<Method>getUserGroups</Method>" in api.package()
    assert client.read_groups_for_user_by_id("17")[0].group_name == "Sales"


def test_grant_permissions_rejects_unknown_code_without_request(api, client):
    with pytest.raises(InvalidArgumentException):
        client.grant_permissions(User(email="jane@example.com"), Group(name="Sales"), ["invalid"])
    assert len(api.requests) == 0


def test_grant_and_revoke_permissions(api, client):
    api.respond(envelope("<Email>jane@example.com</Email><EmployeeID>E-1</EmployeeID>"))
    user = User(email="jane@example.com")

    client.grant_permissions(user, Group(name="Sales"), ["PROCTOR"])
    assert "<Action>Grant</Action>" in api.package()

    result = client.revoke_permissions(user, Group(group_id="12"), ["PROCTOR"])
    assert "<Action>Deny</Action>" in api.package()
    assert result.employee_id == "E-1"


def test_permissions_require_identifiers(api, client):
    with pytest.raises(MissingValueException):
        client.grant_permissions(User(), Group(name="Sales"), ["PROCTOR"])
    with pytest.raises(MissingValueException):
        client.revoke_permissions(User(email="jane@example.com"), Group(), ["PROCTOR"])
    with pytest.raises(InvalidArgumentException):
        client.grant_permissions(User(email="jane@example.com"), Group(name="Sales"), "PROCTOR")
    assert api.requests == []


def test_request_external_authorization(api, client):
    api.respond(envelope(
        "<AuthKey>auth</AuthKey><RequestKey>req</RequestKey><RedirectPath>/go</RedirectPath>"
    ))

    authorization = client.request_external_authorization_by_email("jane@example.com")

    assert authorization.auth_key == "auth"
    assert authorization.request_key == "req"
    assert authorization.redirect_path == "/go"
    assert "<Security><Email>jane@example.com</Email></Security>" in api.package()

    client.request_external_authorization_by_employee_id("E-1")
    assert "<Security><EmployeeID>E-1</EmployeeID></Security>" in api.package()

    with pytest.raises(MissingValueException):
        client.request_external_authorization_by_email("")
    assert len(api.requests) == 2


def test_http_errors_are_not_wrapped(api, client):
    api.respond("Service Unavailable", status_code=503)
    with pytest.raises(httpx.HTTPStatusError):
        client.read_user_by_id("17")


def test_malformed_body_raises_smarteru_exception(api, client, caplog):
    api.respond("this is not xml")
    with caplog.at_level(logging.ERROR):
        with pytest.raises(SmarterUException) as exc_info:
            client.read_user_by_id("17")
    assert exc_info.value.error_codes == []
    assert exc_info.value.response == "this is not xml"
    assert caplog.records[-1].getMessage() == FAILED_REQUEST_LOG_MESSAGE
