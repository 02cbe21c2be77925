"""HRMS Portal package.

This package is organized by feature modules (directory, attendance, leaves, ...)
with a thin Flask controller layer, service/repository layers and one generic
table presenter (``table``) shared by every list screen.
"""
