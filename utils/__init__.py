"""
utils package
-------------

Contains utility modules used throughout the covering engine.

Includes helpers for loading configuration constants, reading conflict tables, validation and logging.
"""
