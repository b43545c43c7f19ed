"""Agenda bounded context: tasks with a category and a due date."""
