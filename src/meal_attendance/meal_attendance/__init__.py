"""Staff meal attendance package.

Organized by feature modules (users, attendance, badges, reports) with a thin
Flask controller layer over service/repository layers.
"""
