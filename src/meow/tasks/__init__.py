"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskKind)
- task_list.py: ordered in-memory collection with find/sort/render
- task_store.py: flat-file load/save
"""
