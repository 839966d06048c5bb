"""saltbox-facts — host fact snapshot for provisioning pipelines."""

__version__ = "0.1.0"
