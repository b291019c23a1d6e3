"""swatch_kit.core — Foundation layer.

Contains the colour conversions, harmonies, named-colour matching, WCAG
contrast, palette export, type definitions and report builder.
This module has NO dependencies on swatch_kit.commands or swatch_kit.registry.
Only stdlib and numpy are allowed here.
"""
