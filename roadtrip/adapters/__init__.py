"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces:
- Road-map storage (text input)
- Route solving (Dijkstra)
- Route rendering (plain text)
"""
