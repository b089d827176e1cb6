"""Build the XML request envelopes expected by the SmarterU API.

Every request has the same outer shape::

    <SmarterU>
        <AccountAPI/><UserAPI/><Method/>
        <Parameters>...</Parameters>
    </SmarterU>

and only ``<Parameters>`` varies by method. Optional values that are unset
are left out entirely, while the containers the API always expects
(``<Groups/>``, ``<Venues/>``, ``<Wages/>``, ``<Users/>`` ...) are emitted
even when empty. Booleans are written as ``1``/``0``.
"""
from __future__ import annotations

import xml.etree.ElementTree as ET
from datetime import date
from enum import Enum
from typing import Any, Iterable, Optional, Sequence, Tuple

from .exceptions import MissingValueException
from .models.common import LearningModule, MembershipAction, SubscriptionVariant, Tag
from .models.group import Group
from .models.permissions import PermissionAction
from .models.user import User
from .queries.groups import GetGroupQuery, ListGroupsQuery
from .queries.learner_report import GetLearnerReportQuery
from .queries.tags import DateRangeTag, MatchTag
from .queries.users import GetUserQuery, ListUsersQuery


XML_DECLARATION = '<?xml version="1.0"?>\n'
LIST_USERS_DATE_FORMAT = "%d/%m/%Y"
REPORT_DATE_FORMAT = "%d-%b-%y"


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _is_set(value: Any) -> bool:
    return value is not None and value != "" and value != []


def _add(parent: ET.Element, tag: str, value: Any = None) -> ET.Element:
    """Append ``<tag>value</tag>`` to ``parent``; ``None`` gives an empty tag."""

    element = ET.SubElement(parent, tag)
    if value is not None:
        element.text = _text(value)
    return element


def _add_if_set(parent: ET.Element, tag: str, value: Any) -> Optional[ET.Element]:
    if not _is_set(value):
        return None
    return _add(parent, tag, value)


def _add_list(parent: ET.Element, container: str, item: str, values: Iterable[Any]) -> ET.Element:
    element = _add(parent, container)
    for value in values:
        _add(element, item, value)
    return element


def _add_match_tag(parent: ET.Element, tag: str, match: MatchTag) -> None:
    element = _add(parent, tag)
    _add(element, "MatchType", match.match_type)
    _add(element, "Value", match.value)


def _add_date_range(parent: ET.Element, tag: str, date_range: DateRangeTag, date_format: str) -> None:
    element = _add(parent, tag)
    _add(element, f"{tag}From", _format_date(date_range.date_from, date_format))
    _add(element, f"{tag}To", _format_date(date_range.date_to, date_format))


def _format_date(value: date, date_format: str) -> str:
    return value.strftime(date_format)


def _add_tags(parent: ET.Element, container: str, item: str, tags: Sequence[Tag], error: str) -> None:
    element = _add(parent, container)
    for tag in tags:
        tag_element = _add(element, item)
        if _is_set(tag.tag_id):
            _add(tag_element, "TagID", tag.tag_id)
        elif _is_set(tag.tag_name):
            _add(tag_element, "TagName", tag.tag_name)
        else:
            raise MissingValueException(error)
        _add(tag_element, "TagValues", tag.tag_values)


def _user_reference(user: User) -> Tuple[str, str]:
    if _is_set(user.email):
        return "Email", user.email
    if _is_set(user.employee_id):
        return "EmployeeID", user.employee_id
    raise MissingValueException("A User must have either an email address or an employee ID.")


def _group_reference(group: Group) -> Tuple[str, str]:
    if _is_set(group.name):
        return "Name", group.name
    if _is_set(group.group_id):
        return "GroupID", group.group_id
    raise MissingValueException("A Group must have either a name or an ID.")


class XMLGenerator:
    """Serialize records and queries into SmarterU request envelopes.

    The methods assume the caller validated its input, but they still raise
    :class:`MissingValueException` when a payload cannot be expressed at
    all (for instance a user with neither email nor employee ID).
    """

    # ------------------------------------------------------------------
    # Envelope helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _envelope(account_api: str, user_api: str, method: str) -> Tuple[ET.Element, ET.Element]:
        root = ET.Element("SmarterU")
        _add(root, "AccountAPI", account_api)
        _add(root, "UserAPI", user_api)
        _add(root, "Method", method)
        parameters = _add(root, "Parameters")
        return root, parameters

    @staticmethod
    def _render(root: ET.Element) -> str:
        return XML_DECLARATION + ET.tostring(root, encoding="unicode") + "\n"

    @staticmethod
    def _user_profile(parent: ET.Element, user: User) -> ET.Element:
        profile = _add(parent, "Profile")
        if user.supervisors:
            _add_list(profile, "Supervisors", "Supervisor", user.supervisors)
        _add_if_set(profile, "Organization", user.organization)
        if user.teams:
            _add_list(profile, "Teams", "Team", user.teams)
        _add_if_set(profile, "Language", user.language)
        _add_if_set(profile, "Status", user.status)
        _add_if_set(profile, "Title", user.title)
        _add_if_set(profile, "Division", user.division)
        if user.allow_feedback:
            _add(profile, "AllowFeedback", True)
        _add_if_set(profile, "PhonePrimary", user.phone_primary)
        _add_if_set(profile, "PhoneAlternate", user.phone_alternate)
        _add_if_set(profile, "PhoneMobile", user.phone_mobile)
        _add_if_set(profile, "Fax", user.fax)
        _add_if_set(profile, "Website", user.website)
        _add_if_set(profile, "Address1", user.address1)
        _add_if_set(profile, "Address2", user.address2)
        _add_if_set(profile, "City", user.city)
        _add_if_set(profile, "Province", user.province)
        _add_if_set(profile, "Country", user.country)
        _add_if_set(profile, "PostalCode", user.postal_code)
        _add_if_set(profile, "SendMailTo", user.send_mail_to)
        _add_if_set(profile, "ReceiveNotifications", user.receive_notifications)
        _add_if_set(profile, "HomeGroup", user.home_group)
        return profile

    @staticmethod
    def _group_permissions(parent: ET.Element, group_name: Optional[str],
                           group_id: Optional[str], permissions: Iterable[Tuple[Any, Any]],
                           action: Optional[MembershipAction] = None) -> None:
        element = _add(parent, "Group")
        if _is_set(group_name):
            _add(element, "GroupName", group_name)
        elif _is_set(group_id):
            _add(element, "GroupID", group_id)
        else:
            raise MissingValueException("Cannot assign permissions in a Group that has no name or ID.")
        if action is not None:
            _add(element, "GroupAction", action)
        permissions_element = _add(element, "GroupPermissions")
        for permission_action, code in permissions:
            permission = _add(permissions_element, "Permission")
            _add(permission, "Action", permission_action)
            _add(permission, "Code", code)

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    def create_user(self, account_api: str, user_api: str, user: User) -> str:
        root, parameters = self._envelope(account_api, user_api, "createUser")
        user_element = _add(parameters, "User")

        if not user.has_identifier:
            raise MissingValueException("Cannot create a User without either an email or employee ID.")
        if not _is_set(user.home_group):
            raise MissingValueException("Cannot create a User without a Home Group.")

        info = _add(user_element, "Info")
        _add_if_set(info, "Email", user.email)
        _add_if_set(info, "EmployeeID", user.employee_id)
        _add(info, "GivenName", user.given_name)
        _add(info, "Surname", user.surname)
        _add(info, "Password", user.password)
        _add_if_set(info, "Timezone", user.timezone)
        _add(info, "LearnerNotifications", bool(user.learner_notifications))
        _add(info, "SupervisorNotifications", bool(user.supervisor_notifications))
        _add(info, "SendEmailTo", user.send_email_to)
        _add_if_set(info, "AlternateEmail", user.alternate_email)
        _add(info, "AuthenticationType", user.authentication_type)

        self._user_profile(user_element, user)

        groups = _add(user_element, "Groups")
        self._group_permissions(groups, user.home_group, None, [])
        for membership in user.groups:
            if _is_set(membership.group_name) and membership.group_name == user.home_group:
                continue
            self._group_permissions(
                groups,
                membership.group_name,
                membership.group_id,
                [(permission.action, permission.code) for permission in membership.permissions],
            )
        _add(user_element, "Venues")
        _add(user_element, "Wages")
        return self._render(root)

    def get_user(self, account_api: str, user_api: str, query: GetUserQuery) -> str:
        root, parameters = self._envelope(account_api, user_api, query.method)
        user = _add(parameters, "User")
        if query.id is not None:
            _add(user, "ID", query.id)
        elif query.email is not None:
            _add(user, "Email", query.email)
        elif query.employee_id is not None:
            _add(user, "EmployeeID", query.employee_id)
        else:
            raise MissingValueException("User identifier must be specified when creating a GetUserQuery.")
        return self._render(root)

    def list_users(self, account_api: str, user_api: str, query: ListUsersQuery) -> str:
        root, parameters = self._envelope(account_api, user_api, "listUsers")
        user = _add(parameters, "User")
        _add(user, "Page", query.page)
        _add_if_set(user, "PageSize", query.page_size)
        _add_if_set(user, "SortField", query.sort_field)
        _add_if_set(user, "SortOrder", query.sort_order)

        filters = _add(user, "Filters")
        if query.has_user_identifier:
            identifier = _add(_add(filters, "Users"), "UserIdentifier")
            if query.email is not None:
                _add_match_tag(identifier, "Email", query.email)
            if query.employee_id is not None:
                _add_match_tag(identifier, "EmployeeID", query.employee_id)
            if query.name is not None:
                _add_match_tag(identifier, "Name", query.name)
        _add_if_set(filters, "HomeGroup", query.home_group)
        _add_if_set(filters, "GroupName", query.group_name)
        _add_if_set(filters, "UserStatus", query.user_status)
        if query.created_date is not None:
            _add_date_range(filters, "CreatedDate", query.created_date, LIST_USERS_DATE_FORMAT)
        if query.modified_date is not None:
            _add_date_range(filters, "ModifiedDate", query.modified_date, LIST_USERS_DATE_FORMAT)
        if query.teams:
            _add_list(filters, "Teams", "TeamName", query.teams)
        return self._render(root)

    def update_user(self, account_api: str, user_api: str, user: User) -> str:
        """Serialize an updateUser call.

        The ``<Identifier>`` block locates the existing user through the old
        email or employee ID when a rename is pending, else through the
        current one. The new values only go into ``<Info>`` when they differ
        from the identifier.
        """

        root, parameters = self._envelope(account_api, user_api, "updateUser")
        user_element = _add(parameters, "User")

        identifier = _add(user_element, "Identifier")
        if _is_set(user.old_email):
            _add(identifier, "Email", user.old_email)
        elif _is_set(user.old_employee_id):
            _add(identifier, "EmployeeID", user.old_employee_id)
        elif user.has_identifier:
            _add(identifier, *_user_reference(user))
        else:
            raise MissingValueException(
                "A User cannot be updated without either an email address or an employee ID."
            )

        info = _add(user_element, "Info")
        if _is_set(user.old_email):
            _add(info, "Email", user.email)
        if _is_set(user.old_employee_id):
            _add(info, "EmployeeID", user.employee_id)
        _add_if_set(info, "GivenName", user.given_name)
        _add_if_set(info, "Surname", user.surname)
        _add_if_set(info, "Password", user.password)
        _add_if_set(info, "TimeZone", user.timezone)
        _add(info, "LearnerNotifications", bool(user.learner_notifications))
        _add(info, "SupervisorNotifications", bool(user.supervisor_notifications))
        _add_if_set(info, "SendEmailTo", user.send_email_to)
        _add_if_set(info, "AlternateEmail", user.alternate_email)
        _add_if_set(info, "AuthenticationType", user.authentication_type)

        self._user_profile(user_element, user)
        _add(user_element, "Groups")
        _add(user_element, "Venues")
        _add(user_element, "Wages")
        return self._render(root)

    def change_permissions(
        self,
        account_api: str,
        user_api: str,
        user: User,
        group: Group,
        permissions: Sequence[str],
        action: PermissionAction,
    ) -> str:
        """Grant or deny ``permissions`` to ``user`` within ``group``."""

        root, parameters = self._envelope(account_api, user_api, "updateUser")
        user_element = _add(parameters, "User")

        identifier = _add(user_element, "Identifier")
        if not user.has_identifier:
            raise MissingValueException(
                "A User's permissions cannot be updated without either an email address or an employee ID."
            )
        _add(identifier, *_user_reference(user))
        _add(user_element, "Info")
        _add(user_element, "Profile")

        groups = _add(user_element, "Groups")
        self._group_permissions(
            groups,
            group.name,
            group.group_id,
            [(action, code) for code in permissions],
            action=MembershipAction.ADD,
        )
        _add(user_element, "Venues")
        _add(user_element, "Wages")
        return self._render(root)

    def request_external_authorization(
        self,
        account_api: str,
        user_api: str,
        *,
        email: Optional[str] = None,
        employee_id: Optional[str] = None,
    ) -> str:
        root, parameters = self._envelope(account_api, user_api, "requestExternalAuthorization")
        security = _add(parameters, "Security")
        if _is_set(email):
            _add(security, "Email", email)
        elif _is_set(employee_id):
            _add(security, "EmployeeID", employee_id)
        else:
            raise MissingValueException(
                "An email address or employee ID is required to request external authorization."
            )
        return self._render(root)

    # ------------------------------------------------------------------
    # Groups
    # ------------------------------------------------------------------
    @staticmethod
    def _group_body(group_element: ET.Element, group: Group) -> None:
        """Help, tag and user limit fields shared by createGroup and updateGroup."""

        _add_if_set(group_element, "UserHelpOverrideDefault", group.user_help_override_default)
        _add_if_set(group_element, "UserHelpEnabled", group.user_help_enabled)
        if group.user_help_email:
            _add(group_element, "UserHelpEmail", ",".join(group.user_help_email))
        _add_if_set(group_element, "UserHelpText", group.user_help_text)
        if group.tags:
            _add_tags(group_element, "Tags2", "Tag2", group.tags, "Every tag must have either a name or an ID.")
        if group.user_limit_enabled is not None and group.user_limit_amount is not None:
            user_limit = _add(group_element, "UserLimit")
            _add(user_limit, "Enabled", group.user_limit_enabled)
            _add(user_limit, "Amount", group.user_limit_amount)

    @staticmethod
    def _learning_modules(parent: ET.Element, modules: Sequence[LearningModule], with_action: bool) -> None:
        container = _add(parent, "LearningModules")
        for module in modules:
            element = _add(container, "LearningModule")
            _add(element, "ID", module.id)
            if with_action:
                _add(element, "LearningModuleAction", module.action)
            _add(element, "AllowSelfEnroll", bool(module.allow_self_enroll))
            _add(element, "AutoEnroll", bool(module.auto_enroll))

    @staticmethod
    def _subscription_variants(parent: ET.Element, variants: Sequence[SubscriptionVariant],
                               with_action: bool) -> None:
        container = _add(parent, "SubscriptionVariants")
        for variant in variants:
            element = _add(container, "SubscriptionVariant")
            _add(element, "ID", variant.id)
            if with_action:
                _add(element, "SubscriptionVariantAction", variant.action)
            _add(element, "RequiresCredits", bool(variant.requires_credits))

    def create_group(self, account_api: str, user_api: str, group: Group) -> str:
        root, parameters = self._envelope(account_api, user_api, "createGroup")
        group_element = _add(parameters, "Group")
        if not _is_set(group.name):
            raise MissingValueException("Cannot create a Group without a name.")
        _add(group_element, "Name", group.name)
        _add_if_set(group_element, "GroupID", group.group_id)
        _add(group_element, "Status", group.status)
        _add(group_element, "Description", group.description)
        _add(group_element, "HomeGroupMessage", group.home_group_message)
        _add_list(group_element, "NotificationEmails", "NotificationEmail", group.notification_emails)
        self._group_body(group_element, group)
        _add(group_element, "Users")
        self._learning_modules(group_element, group.learning_modules, with_action=False)
        if group.subscription_variants:
            self._subscription_variants(group_element, group.subscription_variants, with_action=False)
        _add_if_set(group_element, "DashboardSetID", group.dashboard_set_id)
        return self._render(root)

    def get_group(self, account_api: str, user_api: str, query: GetGroupQuery) -> str:
        root, parameters = self._envelope(account_api, user_api, "getGroup")
        group = _add(parameters, "Group")
        if query.name is not None:
            _add(group, "Name", query.name)
        elif query.group_id is not None:
            _add(group, "GroupID", query.group_id)
        else:
            raise MissingValueException("Group identifier must be specified when creating a GetGroupQuery.")
        return self._render(root)

    def list_groups(self, account_api: str, user_api: str, query: ListGroupsQuery) -> str:
        root, parameters = self._envelope(account_api, user_api, "listGroups")
        filters = _add(_add(parameters, "Group"), "Filters")
        if query.group_name is not None:
            _add_match_tag(filters, "GroupName", query.group_name)
        _add_if_set(filters, "GroupStatus", query.group_status)
        if query.tags:
            _add_tags(
                filters,
                "Tags2",
                "Tag2",
                query.tags,
                "Tags must include a tag identifier when creating a ListGroups query.",
            )
        return self._render(root)

    def update_group(self, account_api: str, user_api: str, group: Group) -> str:
        """Serialize an updateGroup call.

        ``<Identifier>`` uses the old name or old group ID when one is set,
        otherwise the current name (or ID). The body only repeats
        ``<Name>``/``<GroupID>`` when they are being changed.
        """

        root, parameters = self._envelope(account_api, user_api, "updateGroup")
        group_element = _add(parameters, "Group")

        identifier = _add(group_element, "Identifier")
        if _is_set(group.old_name):
            _add(identifier, "Name", group.old_name)
        elif _is_set(group.old_group_id):
            _add(identifier, "GroupID", group.old_group_id)
        else:
            _add(identifier, *_group_reference(group))

        if _is_set(group.old_name):
            _add(group_element, "Name", group.name)
        if _is_set(group.old_group_id):
            _add(group_element, "GroupID", group.group_id)
        _add_if_set(group_element, "Status", group.status)
        _add_if_set(group_element, "Description", group.description)
        _add_if_set(group_element, "HomeGroupMessage", group.home_group_message)
        if group.notification_emails:
            _add_list(group_element, "NotificationEmails", "NotificationEmail", group.notification_emails)
        self._group_body(group_element, group)
        _add(group_element, "Users")
        self._learning_modules(group_element, group.learning_modules, with_action=True)
        self._subscription_variants(group_element, group.subscription_variants, with_action=True)
        _add_if_set(group_element, "DashboardSetID", group.dashboard_set_id)
        return self._render(root)

    def change_group_members(
        self,
        account_api: str,
        user_api: str,
        users: Sequence[User],
        group: Group,
        action: MembershipAction,
    ) -> str:
        """Add ``users`` to, or remove them from, ``group``."""

        root, parameters = self._envelope(account_api, user_api, "updateGroup")
        group_element = _add(parameters, "Group")

        if not group.has_identifier:
            raise MissingValueException("Cannot add or remove users from a Group without a group name or ID.")
        _add(_add(group_element, "Identifier"), *_group_reference(group))

        users_element = _add(group_element, "Users")
        for user in users:
            if not user.has_identifier:
                raise MissingValueException(
                    "All Users being added to or removed from a Group must have an email address or employee ID."
                )
            user_element = _add(users_element, "User")
            _add(user_element, *_user_reference(user))
            _add(user_element, "UserAction", action)
            _add(user_element, "HomeGroup", _is_set(group.name) and user.home_group == group.name)
            _add(user_element, "Permissions")
        _add(group_element, "LearningModules")
        _add(group_element, "SubscriptionVariants")
        return self._render(root)

    # ------------------------------------------------------------------
    # Reports
    # ------------------------------------------------------------------
    def get_learner_report(self, account_api: str, user_api: str, query: GetLearnerReportQuery) -> str:
        root, parameters = self._envelope(account_api, user_api, "getLearnerReport")
        report = _add(parameters, "Report")
        _add(report, "Page", query.page)
        _add(report, "PageSize", query.page_size)
        filters = _add(report, "Filters")
        _add_if_set(filters, "EnrollmentID", query.enrollment_id)

        groups = _add(filters, "Groups")
        if query.group_status is not None:
            _add(groups, "GroupStatus", query.group_status)
        elif query.group_names:
            _add_list(groups, "GroupNames", "GroupName", query.group_names)
        else:
            raise MissingValueException(
                "GetLearnerReport must contain either a Group status or a list of Group names."
            )
        if query.group_tags:
            _add_tags(groups, "GroupTags2", "GroupTag2", query.group_tags, "Tags must have either an ID or a name.")

        self._learning_module_filters(filters, query)

        enrollments = _add(filters, "Enrollments")
        if query.created_date is not None:
            _add_date_range(enrollments, "CreatedDate", query.created_date, REPORT_DATE_FORMAT)
        if query.modified_date is not None:
            _add_date_range(enrollments, "ModifiedDate", query.modified_date, REPORT_DATE_FORMAT)

        users = _add(filters, "Users")
        if query.user_status is not None:
            _add(users, "UserStatus", query.user_status)
        elif query.user_email_addresses or query.user_employee_ids:
            identifier = _add(users, "UserIdentifier")
            for email in query.user_email_addresses:
                _add(identifier, "EmailAddress", email)
            for employee_id in query.user_employee_ids:
                _add(identifier, "EmployeeID", employee_id)
        else:
            raise MissingValueException("GetLearnerReport requires either a User Status or User Identifiers.")

        _add_list(parameters, "Columns", "ColumnName", query.columns)
        _add_list(parameters, "CustomFields", "FieldName", [field.name for field in query.custom_fields])
        return self._render(root)

    @staticmethod
    def _learning_module_filters(filters: ET.Element, query: GetLearnerReportQuery) -> None:
        date_filters = (
            ("CompletedDate", query.completed_dates),
            ("DueDate", query.due_dates),
            ("EnrolledDate", query.enrolled_dates),
            ("GracePeriodDate", query.grace_period_dates),
            ("LastAccessedDate", query.last_accessed_dates),
            ("StartedDate", query.started_dates),
        )
        has_module = query.learning_module_status is not None or bool(query.learning_module_names)
        if not (has_module or query.enrollment_statuses or any(ranges for _, ranges in date_filters)):
            return

        modules = _add(filters, "LearningModules")
        if has_module:
            module = _add(modules, "LearningModule")
            _add_if_set(module, "LearningModuleStatus", query.learning_module_status)
            if query.learning_module_names:
                _add_list(module, "LearningModuleNames", "LearningModuleName", query.learning_module_names)
        if query.enrollment_statuses:
            _add_list(modules, "EnrollmentStatuses", "EnrollmentStatus", query.enrollment_statuses)
        for tag, ranges in date_filters:
            if not ranges:
                continue
            container = _add(modules, f"{tag}s")
            for date_range in ranges:
                _add_date_range(container, tag, date_range, REPORT_DATE_FORMAT)
