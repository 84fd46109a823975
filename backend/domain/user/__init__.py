"""User domain module.

This domain manages the user record shown on the profile page and the
rules for changing the contact email address.
"""
