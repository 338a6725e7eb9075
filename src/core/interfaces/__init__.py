"""Core interfaces.

Structural contracts (Protocol) implemented by adapters: the outage store
and the clock. The waiter depends only on these.
"""
