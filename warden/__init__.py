"""Warden - credential and session authority.

Authenticates principals by email/password, runs the optional emailed
second factor, issues signed bearer tokens and revokes them on logout.
"""

__version__ = "0.1.0"
