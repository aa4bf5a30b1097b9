"""Canned sample plan.

The sample doubles as documentation for new users and as a known-good
fixture: it must always pass validation.
"""
