"""School attendance ledger package.

Organized by feature modules (people, ledger, attendance, reports, ...)
with a thin Flask controller layer over service/storage layers.
"""
