"""
Task subsystem.

Components:
- task_models.py: data structures (Task) and the TaskError hierarchy
- task_store.py: in-memory store with create/get/update/delete/list
- task_api.py: id/filter parsing and formatting helpers used by the front ends
"""
