"""Tutoring Center scheduling package.

Organized by feature modules (courses, sessions, holidays, scheduling, ...)
with a thin Flask controller layer over service/repository layers.
"""
