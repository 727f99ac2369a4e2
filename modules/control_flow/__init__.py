"""
Control Structures Module

Main components:
- run_demo: output lines of the fourteen control-structure examples
- print_demo: print them
"""

from modules.control_flow.demo import EXAMPLES, run_demo, print_demo

__all__ = [
    'EXAMPLES',
    'run_demo',
    'print_demo',
]
