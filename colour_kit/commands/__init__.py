"""colour-kit subcommands, one module each. See colour_kit.registry."""
