"""Link GitHub pull requests to Asana tasks from CI."""

__version__ = "0.1.0"
