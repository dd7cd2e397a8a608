"""
Executor Module - Black Box Interface

Purpose: Run the tabcmd program with a bounded timeout
Interface: TabRunner.run(action, *args) -> stdout
Hidden: Process creation, stream capture, timeout enforcement

Can be replaced with any TabRunner implementation (test doubles, remote runners).
"""

from .interfaces import TabRunner
from .tabcmd import Tabcmd

__all__ = ["TabRunner", "Tabcmd"]
