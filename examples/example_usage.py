"""Example: using the service layer directly.

Reads the sample API dumps in examples/data and prints one staff member's
view of a day, the first history page and the metric cards.
"""

from datetime import date

from src.workboard.workboard.main import create_container
from src.workboard.workboard.status.history import HistoryQuery


def main():
    container = create_container()
    svc = container.status_service
    today = date(2024, 1, 12)

    view = svc.day_view(staff_id=7, target_date=today, today=today)
    print(view.display_date, view.day_status.value)
    print("to submit:", [a.responsibility.title for a in view.to_submit if a.responsibility])
    print("submitted:", [item.submission.id for item in view.submitted])

    for row in svc.history_rows_ui(staff_id=7, query=HistoryQuery()):
        print(row)

    print(svc.metrics(staff_id=7, today=today, since=date(2024, 1, 8)))


if __name__ == "__main__":
    main()
