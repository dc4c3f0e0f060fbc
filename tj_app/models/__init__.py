"""
Data models and contracts module.

Immutable trade snapshots and derived metric bundles.
Follows functional programming principles with frozen dataclasses.
"""
