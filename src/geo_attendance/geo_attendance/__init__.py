"""Geo Attendance package.

This package is organized by feature modules (location, geo, attendance,
reports) with a thin Flask controller layer over plain service classes.
"""
