"""Command-line settings: argument parsing, bound timestamps and validation."""