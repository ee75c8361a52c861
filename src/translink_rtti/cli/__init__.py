"""Command line interface for the RTTI client."""
