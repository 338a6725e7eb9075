"""Domain models and value objects.

Plain data and rules about outages: no file access, no CLI, no clock.
"""
