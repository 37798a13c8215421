"""
Core layer.

Contains the structure analyzer and the configuration models. Nothing in
this package touches the filesystem except the configuration manager.
"""
