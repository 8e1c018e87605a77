"""
Shared constants for slot scheduling.
"""

# Smallest remaining budget still worth probing with another event
MIN_ROOM_MINUTES = 5

# 12-hour clock, e.g. 09:00AM
CLOCK_FORMAT = "%I:%M%p"

DISPLAY_DELIMITER = ","

MORNING_SLOT_NAME = "Morning Slot"
LUNCH_SLOT_NAME = "Lunch Slot"
NOON_SLOT_NAME = "Noon Slot"
