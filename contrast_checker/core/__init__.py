"""contrast_checker.core — Foundation layer.

Contains colour normalisation, luminance, contrast evaluation, the pairs
file parser and the report builder. This module has NO dependencies on
contrast_checker.techniques or contrast_checker.registry.
Only stdlib and numpy are allowed here.
"""
