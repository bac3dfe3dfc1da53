"""IMEI lost/stolen phone report service"""

__version__ = "0.1.0"
