"""Event RSVP backend.

Records attendee responses for public events exactly once per
(event, email) pair and keeps per-response counters in step with them.
"""

__version__ = "0.1.0"
