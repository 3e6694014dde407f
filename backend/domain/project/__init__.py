"""
Project Domain - Projects and their tasks.

This domain handles:
- Creating projects and tracking their status
- Managing the task list of a project
- Calculating completion percentages from completed tasks
"""
