"""Packaged locale trees (ar.json, it.json), read through importlib.resources."""
