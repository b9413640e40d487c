"""Example: call the service layer directly (no Flask).

Prints the dashboard numbers and the month's birthdays for one church.
"""

import importlib
import sys

from config import get_settings_module

from onlychurch.container import build_container


def main():
    tenant_id = sys.argv[1] if len(sys.argv) > 1 else "demo-church"
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    summary = container.dashboard_service.summary(tenant_id)
    for card in summary.cards():
        print(f"{card.title}: {card.value} {card.change}")

    for entry in container.member_service.birthdays_this_month(tenant_id):
        print(f"{entry.day:02d} - {entry.record.full_name} ({entry.age} anos)")


if __name__ == "__main__":
    main()
