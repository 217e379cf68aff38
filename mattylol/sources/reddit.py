"""Most recent Reddit submission for the configured user."""
from urllib.parse import quote

from ..proxy import CachePolicy, Endpoint, ProxyRequest, ProxyResponse, ProxyRoute, Unconfigured
from ..proxy.feeds import FeedItem, first_item, split_subreddit

REDDIT = "https://www.reddit.com"


def post_message(item: FeedItem) -> str:
    title, subreddit = split_subreddit(item.display_title)
    if subreddit:
        return f"reddit: last post in r/{subreddit} — {title}"
    return f"reddit: {item.display_title}"


class RedditStatusRoute(ProxyRoute):
    """GET /api/status/reddit"""

    name = "reddit"
    path = "/api/status/reddit"
    optional = True
    parse = "text"
    success_cache = CachePolicy(300, 3600)

    def resolve_config(self) -> str:
        username = self.settings.reddit_username
        if not username:
            raise Unconfigured(self.name, "REDDIT_USERNAME")
        return username

    def endpoint(self, username: str, request: ProxyRequest) -> Endpoint:
        return Endpoint(
            url=f"{REDDIT}/user/{quote(username, safe='')}/submitted.rss",
            headers={"User-Agent": self.settings.user_agent},
        )

    def normalize(self, username: str, xml: str) -> ProxyResponse:
        item = first_item(xml)
        body = {"ok": True, "message": post_message(item)}
        if item.link is not None:
            body["link"] = item.link
        return ProxyResponse(200, body)
