"""In-memory task tracking: a CRUD store plus a slash-command console."""

__version__ = "0.1.0"
