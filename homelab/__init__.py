"""
Home Lab Inventory - devices, VMs, network gear and storage, and how they relate.
"""

__version__ = '1.0.0'
