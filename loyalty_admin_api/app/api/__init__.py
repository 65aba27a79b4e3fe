"""
API package containing versioned routes.

Versions live in subpackages such as ``v1``, each exposing a
top‑level ``router`` that includes the entity, relationship and
statistics endpoints of the loyalty admin dashboard.
"""
