from fetcher.fetch_popular import fetch_popular
from fetcher.fetch_now_playing import fetch_now_playing

__all__ = ["fetch_popular", "fetch_now_playing"]
