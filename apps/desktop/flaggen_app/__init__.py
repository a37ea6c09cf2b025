"""Desktop drivers for the flag generator: CLI and preview window."""
