"""
Presentation layer: screens and the command line entry point.
"""
