"""tikit - browse, search and act on Jira tickets from the terminal."""

__version__ = "0.1.0"
