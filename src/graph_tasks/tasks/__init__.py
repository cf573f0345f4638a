"""
Task domain.

Components:
- task_models.py: data structures (Task, Report) and the task builder
- errors.py: exception hierarchy shared by storage and service
"""
