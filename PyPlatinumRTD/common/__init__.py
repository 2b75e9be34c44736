"""Common functionality used by the PyPlatinumRTD modules"""
