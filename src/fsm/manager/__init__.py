"""
Exports públicos do módulo fsm/manager.

Máquina de estados (BootstrapMachine) do startup.
"""

from fsm.manager.machine import BootstrapMachine, create_bootstrap_machine

__all__ = [
    "BootstrapMachine",
    "create_bootstrap_machine",
]
