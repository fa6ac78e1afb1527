"""
Generators — produce the distribution files for checkcites.

Each generator module exposes a ``generate_*()`` function that returns
a ``GeneratedFile`` and a ``create_*()`` function that writes it.
"""
