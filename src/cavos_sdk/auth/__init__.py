"""
Auth module for Cavos SDK.

Sign up, sign in and sign out flows orchestrated client-side over
Supabase, Auth0 and the Cavos wallet provider.
"""

from .orchestrator import CavosAuth

__all__ = [
    "CavosAuth",
]
