"""Records exchanged with the SmarterU API."""
from .base import SmarterUModel
from .common import (
    CustomField,
    ErrorCode,
    ExternalAuthorization,
    LearningModule,
    MembershipAction,
    Status,
    SubscriptionVariant,
    Tag,
)
from .group import Group
from .learner_report import LEARNER_REPORT_COLUMNS, LearnerReport
from .permissions import PERMISSION_CODES, GroupPermissions, Permission, PermissionAction
from .timezone import Timezone
from .user import User

__all__ = [
    "CustomField",
    "ErrorCode",
    "ExternalAuthorization",
    "Group",
    "GroupPermissions",
    "LEARNER_REPORT_COLUMNS",
    "LearnerReport",
    "LearningModule",
    "MembershipAction",
    "PERMISSION_CODES",
    "Permission",
    "PermissionAction",
    "SmarterUModel",
    "Status",
    "SubscriptionVariant",
    "Tag",
    "Timezone",
    "User",
]
