"""Version information for tridinspect."""

__version__ = "1.0.0"
__author__ = "Marc Rivero Lopez"
__license__ = "GPL-3.0"
