"""Movie Trends Dashboard.

Fetches movies from TMDb and turns them into dashboard data: monthly
popularity and rating series with percentage changes and moving averages,
top movie rankings and genre distribution.
"""

__version__ = "1.0.0"
__author__ = "Movie Dashboard Team"
