"""
Core wiring.

Components:
- state.py: AppState (stores + logged-in session snapshot)
- api.py: session-level operations used by connectors
- ports.py: storage Protocol
- ids.py: time-based unique id allocation
- security.py: password hashing
"""
