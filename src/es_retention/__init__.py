"""Delete dated Elasticsearch indices once they are older than a number of months."""

__version__ = "0.1.0"
