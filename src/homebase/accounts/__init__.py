"""
Account subsystem.

Components:
- account_models.py: User record
- account_store.py: signup/login/task persistence over the "users" key
"""
