"""
Utility functions module.

Time Semantics:
- Entry and exit times are wall-clock values in the journal's reference timezone
- The engine never converts through tz databases; a fixed UTC offset is applied
  only where session windows (defined in UTC) are matched
- Durations are computed on naive datetimes in that same reference timezone
"""
