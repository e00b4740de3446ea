"""HR Portal package.

This package is organized by feature modules (attendance, employees, leaves,
payroll, reports) with a thin Flask controller layer and service/repository
layers on top of a generic record store.
"""
