"""LSP utilities, LSDB replay testing and command-line helpers for an IS-IS mocking tool."""

__version__ = "2.0.2"