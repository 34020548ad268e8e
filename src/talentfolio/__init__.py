"""Talentfolio - invite-only talent portfolio service.

Administrators invite talents with single-use, time-limited links;
talents build a profile that administrators can publish to a public
gallery.
"""

__version__ = "0.1.0"
