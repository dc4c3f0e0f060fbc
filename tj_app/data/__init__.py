"""
Trade record ingestion module.

Normalizes raw journal rows into TradeInput snapshots and runs form-level
validation before the analytics engine sees them.
"""
