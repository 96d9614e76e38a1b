"""Services Layer — request handlers and fire-and-forget background mutations.

Invariants:
    - Handlers follow Validate → Authorize → Execute, and return payload schemas
    - Handlers never touch HTTP objects; routes wrap results in the Envelope

Design Decisions:
    - One handler class per resource for locality (CheckinHandlers, ScheduleHandlers)
    - Handlers depend on repository Protocols, injected per request
"""
