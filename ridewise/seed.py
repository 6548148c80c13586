"""
Demo data -- registers sample riders and drivers for reviewers.

Enabled with ``SEED_DEMO_DATA=true``; runs when the app is created.

Creates:
  - 5 sample riders
  - 6 sample drivers (all available, no completed rides)
"""

import logging

from ridewise.context import AppContext

logger = logging.getLogger(__name__)


RIDERS = [
    {"name": "Aarav Sharma", "location": "Andheri"},
    {"name": "Priya Patel", "location": "Bandra"},
    {"name": "Rohan Mehta", "location": "Powai"},
    {"name": "Sneha Gupta", "location": "Dadar"},
    {"name": "Vikram Singh", "location": "Colaba"},
]

DRIVERS = [
    {"name": "Ananya Reddy", "location": "Andheri"},
    {"name": "Karan Joshi", "location": "Juhu"},
    {"name": "Meera Nair", "location": "Worli"},
    {"name": "Arjun Kumar", "location": "Powai"},
    {"name": "Diya Iyer", "location": "Chembur"},
    {"name": "Kabir Rao", "location": "Colaba"},
]


def seed_demo_data(ctx: AppContext) -> None:
    if ctx.riders.count() or ctx.drivers.count():
        logger.info("Directories already populated. Skipping seed.")
        return

    for r in RIDERS:
        ctx.riders.register(r["name"], r["location"])
    for d in DRIVERS:
        ctx.drivers.register(d["name"], d["location"])

    logger.info("Seeded %d riders and %d drivers", len(RIDERS), len(DRIVERS))
