"""Points, clusters, k-means++ seeding, file readers, reports and argument parsing."""

__version__ = "0.1.0"