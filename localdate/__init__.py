"""
Locale-aware date formatting helpers

"""
