"""
Feeding schedules: `/feeding-schedules` endpoints and the `feeding_schedules` table.
"""
