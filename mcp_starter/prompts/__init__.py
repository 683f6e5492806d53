"""
Prompts
Reusable prompt templates, discovered automatically.
"""
