"""Synchronous SmarterU API client built on top of httpx."""
from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from datetime import datetime
from typing import Any, Dict, List, NamedTuple, Optional, Sequence, Tuple

import httpx
from defusedxml import DefusedXmlException
from defusedxml.ElementTree import fromstring

from .exceptions import InvalidArgumentException, MissingValueException, SmarterUException, sanitize_request
from .models.common import CustomField, ErrorCode, ExternalAuthorization, MembershipAction, Tag
from .models.group import Group
from .models.learner_report import LearnerReport
from .models.permissions import PERMISSION_CODES, GroupPermissions, Permission, PermissionAction
from .models.user import User
from .queries.groups import GetGroupQuery, ListGroupsQuery
from .queries.learner_report import GetLearnerReportQuery
from .queries.users import GetUserQuery, ListUsersQuery
from .xml_generator import XMLGenerator

logger = logging.getLogger(__name__)

POST_URL = "https://api.smarteru.com/apiv2/"

SMARTERU_EXCEPTION_MESSAGE = "SmarterU rejected the request due to one or more errors."
FAILED_REQUEST_LOG_MESSAGE = (
    "Failed to make request to SmarterU API. See context for request/response details."
)

USER_NOT_FOUND = "GU:03"
GROUP_NOT_FOUND = "GG:03"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_DATE_FORMATS = (
    "%Y-%m-%d",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%d %H:%M:%S",
    "%Y/%m/%d",
    "%d-%b-%y",
    "%d-%b-%Y",
    "%d/%m/%Y",
)


class ApiResponse(NamedTuple):
    """A successful answer together with any non-fatal errors it carried."""

    response: Any
    errors: Dict[str, str]


# ----------------------------------------------------------------------
# Response parsing helpers
# ----------------------------------------------------------------------
def _text(element: Optional[ET.Element], tag: str) -> Optional[str]:
    if element is None:
        return None
    child = element.find(tag)
    if child is None or child.text is None:
        return None
    text = child.text.strip()
    return text or None


def _texts(element: Optional[ET.Element], path: str) -> List[str]:
    if element is None:
        return []
    return [child.text.strip() for child in element.findall(path) if child.text and child.text.strip()]


def _bool(value: Optional[str]) -> Optional[bool]:
    if value is None:
        return None
    return value.lower() in _TRUE_VALUES


def _int(value: Optional[str]) -> Optional[int]:
    return int(value) if value is not None else None


def _float(value: Optional[str]) -> Optional[float]:
    return float(value) if value is not None else None


def _date(value: Optional[str]) -> Optional[datetime]:
    """Parse the assorted date formats SmarterU uses across endpoints."""

    if value is None:
        return None
    for date_format in _DATE_FORMATS:
        try:
            return datetime.strptime(value, date_format)
        except ValueError:
            continue
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        logger.warning("Unrecognised date %r in SmarterU response", value)
        return None


def _read_errors(root: ET.Element) -> List[ErrorCode]:
    return [
        ErrorCode(
            error_code=_text(error, "ErrorID") or "",
            error_message=_text(error, "ErrorMessage") or "",
        )
        for error in root.findall("Errors/Error")
    ]


class Client:
    """Client for the SmarterU XML API.

    Every public method performs exactly one POST to :data:`POST_URL`. Input
    problems are reported before any network traffic as
    :class:`MissingValueException` or :class:`InvalidArgumentException`.
    HTTP error statuses surface as :class:`httpx.HTTPStatusError`. A response
    whose ``<Result>`` is not ``Success`` is logged and raised as
    :class:`SmarterUException`.
    """

    def __init__(
        self,
        account_api: str,
        user_api: str,
        *,
        http_client: Optional[httpx.Client] = None,
        logger: Optional[logging.Logger] = None,
        post_url: str = POST_URL,
        timeout: Optional[float] = None,
    ) -> None:
        if not account_api:
            raise MissingValueException("account_api is required")
        if not user_api:
            raise MissingValueException("user_api is required")

        self.account_api = account_api
        self.user_api = user_api
        self.post_url = post_url
        self.timeout = timeout
        self.logger = logger or logging.getLogger(__name__)
        self.xml_generator = XMLGenerator()
        self._http_client = http_client
        self._owns_http_client = http_client is None

    @classmethod
    def from_settings(cls, settings: Any = None, **kwargs: Any) -> "Client":
        """Build a client from :func:`smarteru.config.settings.get_settings`."""

        from .config.settings import get_settings

        settings = settings or get_settings()
        return cls(
            settings.account_api_key,
            settings.user_api_key,
            post_url=settings.post_url,
            timeout=settings.timeout,
            **kwargs,
        )

    @property
    def http_client(self) -> httpx.Client:
        if self._http_client is None:
            options = {"timeout": self.timeout} if self.timeout is not None else {}
            self._http_client = httpx.Client(**options)
        return self._http_client

    def close(self) -> None:
        if self._owns_http_client and self._http_client is not None:
            self._http_client.close()
            self._http_client = None

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *_exc: Any) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _log_failure(self, request: str, response: str) -> None:
        self.logger.error(
            FAILED_REQUEST_LOG_MESSAGE,
            extra={"request": sanitize_request(request), "response": response},
        )

    def _request(
        self, method: str, xml: str, *, not_found_code: Optional[str] = None
    ) -> Tuple[Optional[ET.Element], Dict[str, str]]:
        """POST ``xml`` and classify the answer.

        Returns the ``<Info>`` element and the non-fatal errors. When the API
        fails with ``not_found_code`` the info element is ``None`` and the
        error is reported in the soft error map instead of being raised.
        """

        self.logger.debug("Sending %s request to SmarterU", method)
        response = self.http_client.post(self.post_url, data={"Package": xml})
        response.raise_for_status()
        body = response.text

        try:
            root = fromstring(body)
        except (ET.ParseError, DefusedXmlException) as exc:
            self._log_failure(xml, body)
            raise SmarterUException(SMARTERU_EXCEPTION_MESSAGE, [], xml, body) from exc

        errors = _read_errors(root)
        if _text(root, "Result") != "Success":
            if not_found_code is not None and any(e.error_code == not_found_code for e in errors):
                self.logger.debug("SmarterU %s found nothing (%s)", method, not_found_code)
                return None, {e.error_code: e.error_message for e in errors}
            self._log_failure(xml, body)
            raise SmarterUException(SMARTERU_EXCEPTION_MESSAGE, errors, xml, body)

        soft_errors = {error.error_code: error.error_message for error in errors}
        if soft_errors:
            self.logger.warning(
                "SmarterU %s succeeded with non-fatal errors: %s", method, ", ".join(soft_errors)
            )
        info = root.find("Info")
        return (info if info is not None else ET.Element("Info")), soft_errors

    @staticmethod
    def _user_from_xml(element: ET.Element) -> User:
        return User(
            id=_text(element, "ID"),
            email=_text(element, "Email"),
            employee_id=_text(element, "EmployeeID"),
            created_date=_date(_text(element, "CreatedDate")),
            modified_date=_date(_text(element, "ModifiedDate")),
            given_name=_text(element, "GivenName"),
            surname=_text(element, "Surname"),
            language=_text(element, "Language"),
            allow_feedback=_bool(_text(element, "AllowFeedback")),
            status=_text(element, "Status"),
            authentication_type=_text(element, "AuthenticationType"),
            timezone=_text(element, "Timezone"),
            alternate_email=_text(element, "AlternateEmail"),
            home_group=_text(element, "HomeGroup"),
            organization=_text(element, "Organization"),
            title=_text(element, "Title"),
            division=_text(element, "Division"),
            supervisors=_texts(element, "Supervisors/Supervisor"),
            phone_primary=_text(element, "PhonePrimary"),
            phone_alternate=_text(element, "PhoneAlternate"),
            phone_mobile=_text(element, "PhoneMobile"),
            send_mail_to=_text(element, "SendMailTo"),
            send_email_to=_text(element, "SendEmailTo"),
            fax=_text(element, "Fax"),
            address1=_text(element, "Address1"),
            address2=_text(element, "Address2"),
            city=_text(element, "City"),
            postal_code=_text(element, "PostalCode"),
            province=_text(element, "Province"),
            country=_text(element, "Country"),
            learner_notifications=_bool(_text(element, "SendWeeklyTaskReminder")),
            supervisor_notifications=_bool(_text(element, "SendWeeklyProgressSummary")),
            teams=_texts(element, "Teams/Team"),
            roles=_texts(element, "Roles/Role"),
            custom_fields=[
                CustomField(name=_text(field, "CustomFieldName"), value=_text(field, "CustomFieldValue"))
                for field in element.findall("CustomFields/CustomField")
            ],
            venues=_texts(element, "Venues/Venue"),
            wages=_texts(element, "Wages/Wage"),
            receive_notifications=_bool(_text(element, "ReceiveNotifications")),
        )

    @staticmethod
    def _identified_user(info: ET.Element) -> User:
        return User(email=_text(info, "Email"), employee_id=_text(info, "EmployeeID"))

    @staticmethod
    def _identified_group(info: ET.Element) -> Group:
        return Group(name=_text(info, "Group"), group_id=_text(info, "GroupID"))

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    def create_user(self, user: User) -> User:
        """Create ``user``; returns a User carrying the stored email and employee ID."""

        if not user.has_identifier:
            raise MissingValueException("Cannot create a User without either an email or employee ID.")
        if not user.home_group:
            raise MissingValueException("Cannot create a User without a Home Group.")

        xml = self.xml_generator.create_user(self.account_api, self.user_api, user)
        info, _errors = self._request("createUser", xml)
        return self._identified_user(info)

    def get_user(self, query: GetUserQuery) -> ApiResponse:
        """Read a single user.

        ``response`` is ``None`` when SmarterU reports that the user does
        not exist.
        """

        if query.id is None and query.email is None and query.employee_id is None:
            raise MissingValueException("User identifier must be specified when creating a GetUserQuery.")

        query.method = "getUser"
        xml = self.xml_generator.get_user(self.account_api, self.user_api, query)
        info, errors = self._request("getUser", xml, not_found_code=USER_NOT_FOUND)
        if info is None:
            return ApiResponse(None, errors)
        element = info.find("User")
        if element is None or len(element) == 0:
            return ApiResponse(None, errors)
        return ApiResponse(self._user_from_xml(element), errors)

    def read_user_by_id(self, user_id: str) -> Optional[User]:
        return self.get_user(GetUserQuery(id=user_id)).response

    def read_user_by_email(self, email: str) -> Optional[User]:
        return self.get_user(GetUserQuery(email=email)).response

    def read_user_by_employee_id(self, employee_id: str) -> Optional[User]:
        return self.get_user(GetUserQuery(employee_id=employee_id)).response

    def list_users(self, query: ListUsersQuery) -> List[User]:
        xml = self.xml_generator.list_users(self.account_api, self.user_api, query)
        info, _errors = self._request("listUsers", xml)
        return [
            User(
                id=_text(element, "ID"),
                email=_text(element, "Email"),
                employee_id=_text(element, "EmployeeID"),
                given_name=_text(element, "GivenName"),
                surname=_text(element, "Surname"),
                status=_text(element, "Status"),
                title=_text(element, "Title"),
                division=_text(element, "Division"),
                home_group=_text(element, "HomeGroup"),
                created_date=_date(_text(element, "CreatedDate")),
                modified_date=_date(_text(element, "ModifiedDate")),
                teams=_texts(element, "Teams/Team"),
            )
            for element in info.findall("Users/User")
        ]

    def update_user(self, user: User) -> User:
        """Update ``user``.

        Once SmarterU accepts the change, ``old_email`` and
        ``old_employee_id`` are reset on the instance passed in so that
        reusing it does not resend the rename.
        """

        if not (user.old_email or user.old_employee_id or user.has_identifier):
            raise MissingValueException(
                "A User cannot be updated without either an email address or an employee ID."
            )

        xml = self.xml_generator.update_user(self.account_api, self.user_api, user)
        info, _errors = self._request("updateUser", xml)
        user.old_email = None
        user.old_employee_id = None
        return self._identified_user(info)

    def get_user_groups(self, query: GetUserQuery) -> ApiResponse:
        """List the groups a user belongs to, with the user's permissions in each."""

        if query.id is None and query.email is None and query.employee_id is None:
            raise MissingValueException("User identifier must be specified when creating a GetUserQuery.")

        query.method = "getUserGroups"
        xml = self.xml_generator.get_user(self.account_api, self.user_api, query)
        info, errors = self._request("getUserGroups", xml)
        memberships = []
        for element in info.findall("UserGroups/Group"):
            name = _text(element, "Name")
            memberships.append(
                GroupPermissions(
                    group_name=name,
                    group_id=None if name else _text(element, "Identifier"),
                    home_group=_bool(_text(element, "IsHomeGroup")),
                    permissions=[Permission(code=code) for code in _texts(element, "Permissions/Permission")],
                )
            )
        return ApiResponse(memberships, errors)

    def read_groups_for_user_by_id(self, user_id: str) -> List[GroupPermissions]:
        return self.get_user_groups(GetUserQuery(id=user_id)).response

    def read_groups_for_user_by_email(self, email: str) -> List[GroupPermissions]:
        return self.get_user_groups(GetUserQuery(email=email)).response

    def read_groups_for_user_by_employee_id(self, employee_id: str) -> List[GroupPermissions]:
        return self.get_user_groups(GetUserQuery(employee_id=employee_id)).response

    def grant_permissions(self, user: User, group: Group, permissions: Sequence[str]) -> User:
        return self._change_permissions(user, group, permissions, PermissionAction.GRANT)

    def revoke_permissions(self, user: User, group: Group, permissions: Sequence[str]) -> User:
        return self._change_permissions(user, group, permissions, PermissionAction.DENY)

    def _change_permissions(
        self, user: User, group: Group, permissions: Sequence[str], action: PermissionAction
    ) -> User:
        if isinstance(permissions, str) or not all(isinstance(code, str) for code in permissions):
            raise InvalidArgumentException('"permissions" must be a list of strings.')
        for code in permissions:
            if code not in PERMISSION_CODES:
                raise InvalidArgumentException(f'"{code}" is not one of the valid permissions.')
        if not user.has_identifier:
            raise MissingValueException(
                "A User's permissions cannot be updated without either an email address or an employee ID."
            )
        if not group.has_identifier:
            raise MissingValueException("Cannot assign permissions in a Group that has no name or ID.")

        xml = self.xml_generator.change_permissions(
            self.account_api, self.user_api, user, group, list(permissions), action
        )
        info, _errors = self._request("updateUser", xml)
        return self._identified_user(info)

    def request_external_authorization_by_email(self, email: str) -> ExternalAuthorization:
        if not email:
            raise MissingValueException("An email address is required to request external authorization.")
        xml = self.xml_generator.request_external_authorization(self.account_api, self.user_api, email=email)
        return self._external_authorization(xml)

    def request_external_authorization_by_employee_id(self, employee_id: str) -> ExternalAuthorization:
        if not employee_id:
            raise MissingValueException("An employee ID is required to request external authorization.")
        xml = self.xml_generator.request_external_authorization(
            self.account_api, self.user_api, employee_id=employee_id
        )
        return self._external_authorization(xml)

    def _external_authorization(self, xml: str) -> ExternalAuthorization:
        info, _errors = self._request("requestExternalAuthorization", xml)
        return ExternalAuthorization(
            auth_key=_text(info, "AuthKey"),
            request_key=_text(info, "RequestKey"),
            redirect_path=_text(info, "RedirectPath"),
        )

    # ------------------------------------------------------------------
    # Groups
    # ------------------------------------------------------------------
    def create_group(self, group: Group) -> Group:
        if not group.name:
            raise MissingValueException("Cannot create a Group without a name.")
        xml = self.xml_generator.create_group(self.account_api, self.user_api, group)
        info, _errors = self._request("createGroup", xml)
        return self._identified_group(info)

    def get_group(self, query: GetGroupQuery) -> ApiResponse:
        """Read a single group; ``response`` is ``None`` if it does not exist."""

        if query.name is None and query.group_id is None:
            raise MissingValueException("Group identifier must be specified when creating a GetGroupQuery.")

        xml = self.xml_generator.get_group(self.account_api, self.user_api, query)
        info, errors = self._request("getGroup", xml, not_found_code=GROUP_NOT_FOUND)
        if info is None:
            return ApiResponse(None, errors)
        element = info.find("Group")
        if element is None or len(element) == 0:
            return ApiResponse(None, errors)

        group = Group(
            name=_text(element, "Name"),
            group_id=_text(element, "GroupID"),
            created_date=_date(_text(element, "CreatedDate")),
            modified_date=_date(_text(element, "ModifiedDate")),
            description=_text(element, "Description"),
            home_group_message=_text(element, "HomeGroupMessage"),
            notification_emails=_texts(element, "NotificationEmails/NotificationEmail"),
            user_count=_int(_text(element, "UserCount")),
            learning_module_count=_int(_text(element, "LearningModuleCount")),
            tags=[
                Tag(
                    tag_id=_text(tag, "TagID"),
                    tag_name=_text(tag, "TagName"),
                    tag_values=_text(tag, "TagValues"),
                )
                for tag in element.findall("Tags2/Tag2")
            ],
            status=_text(element, "Status"),
        )
        return ApiResponse(group, errors)

    def read_group_by_name(self, name: str) -> Optional[Group]:
        return self.get_group(GetGroupQuery(name=name)).response

    def read_group_by_id(self, group_id: str) -> Optional[Group]:
        return self.get_group(GetGroupQuery(group_id=group_id)).response

    def list_groups(self, query: ListGroupsQuery) -> ApiResponse:
        xml = self.xml_generator.list_groups(self.account_api, self.user_api, query)
        info, errors = self._request("listGroups", xml)
        groups = [
            Group(name=_text(element, "Name"), group_id=_text(element, "GroupID"))
            for element in info.findall("Groups/Group")
        ]
        return ApiResponse(groups, errors)

    def update_group(self, group: Group) -> ApiResponse:
        """Update ``group``.

        On success ``old_name`` and ``old_group_id`` are reset on the
        instance passed in.
        """

        if not (group.old_name or group.old_group_id or group.has_identifier):
            raise MissingValueException("A Group cannot be updated without either a name or a group ID.")

        xml = self.xml_generator.update_group(self.account_api, self.user_api, group)
        info, errors = self._request("updateGroup", xml)
        group.old_name = None
        group.old_group_id = None
        return ApiResponse(self._identified_group(info), errors)

    def add_users_to_group(self, users: Sequence[User], group: Group) -> Group:
        return self._change_group_members(users, group, MembershipAction.ADD)

    def remove_users_from_group(self, users: Sequence[User], group: Group) -> Group:
        return self._change_group_members(users, group, MembershipAction.REMOVE)

    def _change_group_members(self, users: Sequence[User], group: Group, action: MembershipAction) -> Group:
        if not group.has_identifier:
            raise MissingValueException("Cannot add or remove users from a Group without a group name or ID.")
        if isinstance(users, (str, bytes)) or not all(isinstance(user, User) for user in users):
            raise InvalidArgumentException('"users" must be a list of User instances.')
        for user in users:
            if not user.has_identifier:
                raise MissingValueException(
                    "All Users being added to or removed from a Group must have an email address or employee ID."
                )

        xml = self.xml_generator.change_group_members(self.account_api, self.user_api, list(users), group, action)
        info, _errors = self._request("updateGroup", xml)
        return self._identified_group(info)

    # ------------------------------------------------------------------
    # Reports
    # ------------------------------------------------------------------
    def get_learner_report(self, query: GetLearnerReportQuery) -> List[LearnerReport]:
        if not query.has_group_filter:
            raise MissingValueException(
                "GetLearnerReport must contain either a Group status or a list of Group names."
            )
        for tag in query.group_tags:
            if not tag.has_identifier:
                raise MissingValueException("Tags must have either an ID or a name.")
        if not query.has_user_filter:
            raise MissingValueException("GetLearnerReport requires either a User Status or User Identifiers.")

        xml = self.xml_generator.get_learner_report(self.account_api, self.user_api, query)
        info, _errors = self._request("getLearnerReport", xml)
        return [
            LearnerReport(
                id=_text(element, "ID"),
                course_name=_text(element, "CourseName"),
                surname=_text(element, "LastName"),
                given_name=_text(element, "FirstName"),
                learning_module_id=_text(element, "LearningModuleID"),
                user_id=_text(element, "UserID"),
                created_date=_date(_text(element, "CreatedDate")),
                modified_date=_date(_text(element, "ModifiedDate")),
                alternate_email=_text(element, "AlternateEmail"),
                completed_date=_date(_text(element, "CompletedDate")),
                course_duration=_text(element, "CourseDuration"),
                course_session_id=_text(element, "CourseSessionID"),
                division=_text(element, "Division"),
                due_date=_date(_text(element, "DueDate")),
                employee_id=_text(element, "EmployeeID"),
                enrolled_date=_date(_text(element, "EnrolledDate")),
                grade=_text(element, "Grade"),
                grade_percentage=_float(_text(element, "GradePercentage")),
                group_id=_text(element, "GroupID"),
                group_name=_text(element, "GroupName"),
                last_accessed_date=_date(_text(element, "LastAccessedDate")),
                points=_int(_text(element, "Points")),
                progress=_text(element, "Progress"),
                role_id=_text(element, "RoleID"),
                started_date=_date(_text(element, "StartedDate")),
                subscription_name=_text(element, "SubscriptionName"),
                title=_text(element, "Title"),
                user_email=_text(element, "UserEmail"),
                variant_end_date=_date(_text(element, "VariantEndDate")),
                variant_name=_text(element, "VariantName"),
                variant_start_date=_date(_text(element, "VariantStartDate")),
            )
            for element in info.findall("LearnerReport/Learner")
        ]
