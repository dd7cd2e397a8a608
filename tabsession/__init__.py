"""
Tabsession - Tableau session management over tabcmd

A thin layer that drives the external ``tabcmd`` program to log in to a
Tableau server, refresh data extracts and log out again.

Architecture:
- Each module is self-contained with clear interfaces
- The session talks to the executor only through the TabRunner protocol
- All server communication is delegated to tabcmd

Modules:
- executor: Runs tabcmd with a bounded timeout and captures its output
- session: Tracks login state and translates results into state changes
"""

__version__ = "1.0.0"
