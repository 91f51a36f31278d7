"""School Admin front-end package.

Organized by feature modules (students, attendance, finance, reports, ...)
with a thin Flask controller layer over service/repository layers. All
records live in the remote school backend and are reached through
``school_admin.api``.
"""
