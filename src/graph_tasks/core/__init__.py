"""
Core: ports (Protocols), the task service and application state.
"""
