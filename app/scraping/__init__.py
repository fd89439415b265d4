"""
Config-driven actor scraping: provider configs, fetching, extraction.
"""
