"""
Task subsystem.

Components:
- task_models.py: data structures (Task, LeaderboardEntry)
- task_ops.py: pure collection operations and derived views
"""
