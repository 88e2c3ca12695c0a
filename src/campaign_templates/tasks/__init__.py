"""
Task subsystem.

Components:
- task_models.py: data structures (Project, Task, Tag, Offset)
- placeholders.py: «token» substitution in task names/notes
- categories.py: pruning of tasks tagged with unselected categories
- offsets.py: $DEFER= / $DUE= directive parsing and date math
- template_store.py: JSON-backed template library
"""
