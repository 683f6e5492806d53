"""
Tools
Each module here binds a RegisterableModule to MODULE and is picked up by
auto-discovery. Files starting with "_" are ignored.
"""
