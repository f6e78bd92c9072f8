"""Command line interface for cumtd-transit."""
