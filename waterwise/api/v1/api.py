"""
API v1 router configuration.
"""

from fastapi import APIRouter

from waterwise.api.v1.endpoints import (
    articles,
    auth,
    calculator,
    community,
    water_map,
    profiles,
    videos,
    weather,
)

api_router = APIRouter()

# One router per client page
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(articles.router, prefix="/articles", tags=["education"])
api_router.include_router(videos.router, prefix="/videos", tags=["videos"])
api_router.include_router(water_map.router, prefix="/map", tags=["map"])
api_router.include_router(weather.router, prefix="/weather", tags=["map"])
api_router.include_router(community.router, prefix="/community", tags=["community"])
api_router.include_router(
    calculator.router, prefix="/calculator", tags=["calculator"]
)
api_router.include_router(profiles.router, prefix="/profiles", tags=["profiles"])
