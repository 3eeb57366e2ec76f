"""
Command modules for the ledgerfmt CLI.
"""
