"""
Core components: metadata, settings, scalars and the storage contract.
"""
