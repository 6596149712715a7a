"""
API package containing the HTTP routes.

``router.py`` exposes a top‑level ``router`` which includes every
resource router defined in ``endpoints``.
"""
