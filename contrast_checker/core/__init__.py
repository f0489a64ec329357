"""contrast_checker.core — Foundation layer.

Contains luminance and contrast maths, the palette and rule types, the
validator, and the report builder. Only stdlib and numpy are allowed here.
"""
