from .github import GithubStatusRoute, commit_message
from .jupiter import PositionsRoute, PriceRoute
from .reddit import RedditStatusRoute, post_message
from .weather import WeatherStatusRoute, conditions_message

ROUTES = [
    PriceRoute,
    PositionsRoute,
    GithubStatusRoute,
    RedditStatusRoute,
    WeatherStatusRoute,
]

__all__ = [
    "GithubStatusRoute",
    "PositionsRoute",
    "PriceRoute",
    "RedditStatusRoute",
    "WeatherStatusRoute",
    "commit_message",
    "post_message",
    "conditions_message",
    "ROUTES",
]
