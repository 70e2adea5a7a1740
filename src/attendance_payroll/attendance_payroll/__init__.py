"""Attendance & Payroll package.

Feature modules (shifts, schedules, attendance, leave, expenses, payroll, ...)
keep pure domain logic apart from the MySQL repositories and the thin Flask
controller layer.
"""
