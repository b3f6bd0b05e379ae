"""School records package.

Feature modules (students, classes, grades, attendance, assignments,
departments) sit on top of a generic gateway to the remote record store.
Search and reporting work on the canonical models those gateways return.
"""
