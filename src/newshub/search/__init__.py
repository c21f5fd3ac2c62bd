from newshub.search.base import NewsSource
from newshub.search.thenewsapi import TheNewsAPIClient, build_params, select_endpoint

__all__ = ["NewsSource", "TheNewsAPIClient", "build_params", "select_endpoint"]
