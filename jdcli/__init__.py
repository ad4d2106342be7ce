"""
jdcli: a command-line client for MyJDownloader devices.
"""

__version__ = "0.3.0"
