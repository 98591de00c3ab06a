"""Adapters layer for the ArchStats report renderer.

This layer contains all adapters that translate between the core domain
and external systems (stats API, Mojang APIs, cache, image rendering).
"""
