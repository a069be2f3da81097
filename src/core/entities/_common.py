"""Patterns shared by several entity schemas."""

UUID_PATTERN = r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"

EMPLOYEE_CODE_PATTERN = r"[a-zA-Z0-9_-]+"
