"""Page Links Service Package."""

__version__ = "1.0.0"
__author__ = "Bharat kumar"
__description__ = (
    "Pagination link windows and entries summaries, served from AWS Lambda"
)

__all__ = ["handlers", "pagelinks"]
