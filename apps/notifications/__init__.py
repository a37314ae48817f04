"""
Notifications App - per-caller inbox keyed by X-User-ID.

Read and delete operations on missing notifications are no-ops so clients
can retry them safely.
"""
