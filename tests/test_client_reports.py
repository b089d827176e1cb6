from datetime import date, datetime

import pytest
from conftest import envelope

from smarteru.exceptions import MissingValueException
from smarteru.models import Tag
from smarteru.queries import DateRangeTag, GetLearnerReportQuery

REPORT_INFO = """
<LearnerReport>
  <Learner>
    <ID>100</ID>
    <CourseName>Safety 101</CourseName>
    <LastName>Doe</LastName>
    <FirstName>Jane</FirstName>
    <LearningModuleID>7</LearningModuleID>
    <UserID>17</UserID>
    <CreatedDate>2022-07-01</CreatedDate>
    <ModifiedDate>2022-07-02</ModifiedDate>
    <CompletedDate>05-Jul-22</CompletedDate>
    <Grade>A</Grade>
    <GradePercentage>93.5</GradePercentage>
    <Points>12</Points>
    <UserEmail>jane@example.com</UserEmail>
  </Learner>
  <Learner>
    <ID>101</ID>
    <CourseName>Safety 102</CourseName>
    <CompletedDate>not a date</CompletedDate>
  </Learner>
</LearnerReport>
"""


def test_get_learner_report(api, client):
    api.respond(envelope(REPORT_INFO))
    query = GetLearnerReportQuery(
        group_names=["Sales"],
        user_status="All",
        completed_dates=[DateRangeTag(date_from=date(2022, 7, 1), date_to=date(2022, 7, 31))],
    )

    rows = client.get_learner_report(query)

    assert [row.id for row in rows] == ["100", "101"]
    first = rows[0]
    assert first.given_name == "Jane"
    assert first.surname == "Doe"
    assert first.completed_date == datetime(2022, 7, 5)
    assert first.grade_percentage == 93.5
    assert first.points == 12
    assert rows[1].completed_date is None
    assert "<Method>getLearnerReport</Method>" in api.package()
    assert "<CompletedDateFrom>01-Jul-22</CompletedDateFrom>" in api.package()


def test_get_learner_report_requires_group_filter(api, client):
    with pytest.raises(MissingValueException, match="Group status"):
        client.get_learner_report(GetLearnerReportQuery(user_status="All"))
    assert api.requests == []


def test_get_learner_report_requires_user_filter(api, client):
    with pytest.raises(MissingValueException, match="User Status"):
        client.get_learner_report(GetLearnerReportQuery(group_status="Active"))
    assert api.requests == []


def test_get_learner_report_requires_tag_identifiers(api, client):
    query = GetLearnerReportQuery(group_status="Active", user_status="All", group_tags=[Tag(tag_values="x")])
    with pytest.raises(MissingValueException, match="Tags"):
        client.get_learner_report(query)
    assert api.requests == []
