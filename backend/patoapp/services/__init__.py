"""Services Layer — stateful components that own storage keys.

Invariants:
    - PatoRepository owns patoapp_patos; AuthStore owns patoapp_user and patoapp_users
    - Services never call each other's storage keys

Design Decisions:
    - IO lives here (imperative shell); filtering and validation come from core/
"""
