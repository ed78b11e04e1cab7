"""
Observers Package - Run Listeners.

Observers:
    - PrintObserver: prints each passing number and a completion line
    - CountObserver: tallies passing numbers and prints the total at the end
"""

from number_pipeline.observers.counter import CountObserver
from number_pipeline.observers.factory import build_observers
from number_pipeline.observers.printer import PrintObserver

__all__ = [
    "CountObserver",
    "PrintObserver",
    "build_observers",
]
