"""
ledgerfmt – Ledger File Formatting and Reconciliation Markers

A Python-based command-line tool for reorganizing plain-text ledger files
(alignment, stable date sorting) and toggling reconciliation markers while
guaranteeing that no meaningful content is altered.
"""

__version__ = "0.1.0"
__author__ = "Conrad"
