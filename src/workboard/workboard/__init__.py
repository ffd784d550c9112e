"""Workboard package.

Daily work status engine for the responsibility dashboard. Organized by
feature modules (submissions, status) with pure functions at the core and a
thin service/repository layer around them.
"""
