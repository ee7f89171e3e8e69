"""
Processing Package.

The decode pipeline: splitting raw analyser output into lines, lines into
surface and feature fields, and fields into tokens.
"""
