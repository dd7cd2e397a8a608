"""
Session Module - Black Box Interface

Purpose: Track Tableau login state and drive tabcmd actions
Interface: login(), login_online(), logout(), refresh_extracts()
Hidden: tabcmd argument layout, server URI normalization, fallback order

The executor is injected, so any TabRunner implementation can back a session.
"""

from .session import ONLINE_SERVERS, Tableau, add_https, create_tableau

__all__ = ["ONLINE_SERVERS", "Tableau", "add_https", "create_tableau"]
