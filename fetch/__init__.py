from fetch.client import PageFetcher

__all__ = ["PageFetcher"]
