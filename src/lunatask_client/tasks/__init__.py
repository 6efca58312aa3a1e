"""
Task data model.

Components:
- task_models.py: Task, ExternalSource, enums and create/update request shapes
"""
