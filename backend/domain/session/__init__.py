"""Session domain module.

Server-held sessions identifying the currently authenticated user.
Sign-in is handled by the authentication provider; this service only
resolves and terminates sessions.
"""
