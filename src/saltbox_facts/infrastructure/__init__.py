"""Infrastructure layer: local files and the HTTP client.

Infrastructure may import from domain and config, never from services,
commands, or output.
"""
