"""Small tools: a calculator, integer sorting, an in-process game chat server, a music library shell and an HTTP HEAD client."""

__version__ = "0.1.0"