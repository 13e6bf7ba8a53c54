"""colour_kit.core — Foundation layer.

Contains the Color value type, packed channel layouts, the HTML colour
parser, the named colour palette, settings loading and the report builder.
This module has NO dependencies on colour_kit.commands or colour_kit.registry.
Only stdlib is allowed here; numpy lives in colour_kit.batch.
"""
