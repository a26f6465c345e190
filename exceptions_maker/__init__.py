"""Convert the CNCF license exceptions spreadsheet into an SPDX manifest and JSON."""

__version__ = "0.1.0"
