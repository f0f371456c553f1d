"""Small, stateless helpers consumed by the metadata layer.

Import specific helpers from their defining modules.
"""
