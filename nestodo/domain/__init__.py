"""Domain layer for nestodo.

Pure models and functions for the todo forest. Nothing in this
package performs I/O.
"""
