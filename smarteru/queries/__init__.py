"""Query objects for the SmarterU read, list and report calls."""
from .groups import GetGroupQuery, ListGroupsQuery
from .learner_report import ENROLLMENT_STATUSES, GetLearnerReportQuery, LearningModuleStatus
from .tags import DateRangeTag, MatchTag, MatchType
from .users import MAX_PAGE_SIZE, GetUserQuery, ListUsersQuery, QueryStatus

__all__ = [
    "DateRangeTag",
    "ENROLLMENT_STATUSES",
    "GetGroupQuery",
    "GetLearnerReportQuery",
    "GetUserQuery",
    "LearningModuleStatus",
    "ListGroupsQuery",
    "ListUsersQuery",
    "MAX_PAGE_SIZE",
    "MatchTag",
    "MatchType",
    "QueryStatus",
]
