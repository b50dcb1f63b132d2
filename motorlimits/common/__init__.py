"""Common functions and classes."""
