"""Office check-in package.

This package is organized by feature modules (attendance, users, api, storage)
with a thin Flask controller layer over service/repository layers.
"""
