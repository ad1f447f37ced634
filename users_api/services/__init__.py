"""Services Layer — request handlers that turn core results into HTTP responses.

Invariants:
    - Handlers never raise for expected validation failures
    - Unexpected faults propagate to the global error handlers
"""
