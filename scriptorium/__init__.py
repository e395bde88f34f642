"""
Scriptorium core: persistence for user accounts.
"""
