import pytest

from src.workboard.workboard.core.exceptions import ValidationError
from src.workboard.workboard.submissions.mapper import assignment_from_api, submission_from_api


def test_assignment_payload_with_nested_data():
    a = assignment_from_api(
        {
            "id": "12",
            "staffId": 7,
            "responsibilityId": 3,
            "status": "IN_PROGRESS",
            "responsibility": {"id": 3, "title": "Inventory", "startDate": "2024-01-01", "endDate": None},
            "workSubmissions": [
                {"id": 1, "assignmentId": 12, "workDate": "2024-01-10", "hoursWorked": "2.5", "status": "VERIFIED"},
                "junk",
            ],
        }
    )

    assert a.id == "12"
    assert a.responsibility.title == "Inventory"
    assert a.responsibility.start_date == "2024-01-01"
    assert a.responsibility.end_date is None
    assert len(a.work_submissions) == 1
    assert a.work_submissions[0].hours_worked == 2.5


def test_submission_keeps_dates_as_delivered():
    s = submission_from_api(
        {
            "id": 5,
            "workDate": "2024-03-01T23:59:00Z",
            "submittedAt": "2024-03-02T08:00:00Z",
            "hoursWorked": "n/a",
            "assignment": {"id": 2, "status": "SUBMITTED"},
        }
    )

    assert s.work_date == "2024-03-01T23:59:00Z"
    assert s.effective_date_value == "2024-03-01T23:59:00Z"
    assert s.hours_worked is None
    assert s.assignment.status == "SUBMITTED"


def test_effective_date_falls_back_to_submitted_at():
    s = submission_from_api({"id": 1, "workDate": "", "submittedAt": "2024-01-12T10:00:00"})
    assert s.effective_date_value == "2024-01-12T10:00:00"


@pytest.mark.parametrize("payload", [{}, {"id": None}, {"id": ""}])
def test_payload_without_id_is_rejected(payload):
    with pytest.raises(ValidationError):
        submission_from_api(payload)
    with pytest.raises(ValidationError):
        assignment_from_api(payload)
