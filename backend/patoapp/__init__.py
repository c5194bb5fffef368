"""PatoApp Package — duck species catalog with mock auth and plan upgrades.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
