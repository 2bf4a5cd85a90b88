"""Job Search - track companies, statuses and job applications."""

__version__ = "1.0.0"
