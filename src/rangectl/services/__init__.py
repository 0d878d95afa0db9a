"""Service layer — the conversion, validation and preset engines.

Services may import from domain and infrastructure layers.
They must never import from commands or output.
"""
