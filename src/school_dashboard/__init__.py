"""School administration dashboard package.

Organized by feature modules (enrollment, users, attendance, events, ...)
over an in-memory roster, with a thin Flask JSON controller layer on top of
plain service classes.
"""
