"""Command line entry points for pbst."""
