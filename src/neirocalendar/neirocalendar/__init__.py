"""Neiro calendar package.

Monthly attendance calendar organized by feature modules (attendance,
billing, calendar_view) with a thin Flask controller layer on top of
service/repository layers.
"""
