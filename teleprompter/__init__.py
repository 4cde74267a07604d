"""Teleprompter

A small service for managing versioned prompts referenced by a stable id.
Provides a REST API for writing, reading, rolling back and deleting prompts
and notifies subscribers of every change through a per-namespace queue.
"""

__version__ = "0.1.0"
